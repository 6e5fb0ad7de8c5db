"""API Schemas for request/response validation."""

from tasklist.infrastructure.api.schemas.list_schemas import (
    ListCreate,
    ListResponse,
    ListUpdate,
)
from tasklist.infrastructure.api.schemas.task_schemas import (
    MessageResponse,
    TaskCreate,
    TaskResponse,
    TaskUpdate,
)
from tasklist.infrastructure.api.schemas.user_schemas import (
    AccessTokenResponse,
    CredentialsRequest,
    UserResponse,
)

__all__ = [
    "AccessTokenResponse",
    "CredentialsRequest",
    "ListCreate",
    "ListResponse",
    "ListUpdate",
    "MessageResponse",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
    "UserResponse",
]
