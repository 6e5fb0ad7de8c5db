"""SQLAlchemy models for the Tasklist tables.

All models inherit from the Base class defined in database.py and are
created on application startup in development mode.
"""

from tasklist.infrastructure.persistence.models.task import TaskModel
from tasklist.infrastructure.persistence.models.task_list import ListModel
from tasklist.infrastructure.persistence.models.user import UserModel
from tasklist.infrastructure.persistence.models.user_session import UserSessionModel

__all__ = [
    "ListModel",
    "TaskModel",
    "UserModel",
    "UserSessionModel",
]

# Importing the listeners attaches the password hashing hook to UserModel
from tasklist.infrastructure.persistence import event_listeners  # noqa: E402, F401
