"""Persistence repositories for database operations."""

from tasklist.infrastructure.persistence.repositories.list_repository import (
    ListRepository,
)
from tasklist.infrastructure.persistence.repositories.session_repository import (
    SessionRepository,
)
from tasklist.infrastructure.persistence.repositories.task_repository import (
    TaskRepository,
)
from tasklist.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "ListRepository",
    "SessionRepository",
    "TaskRepository",
    "UserRepository",
]
