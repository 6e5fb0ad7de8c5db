"""API Routes for Tasklist."""

from tasklist.infrastructure.api.routes.lists_router import router as lists_router
from tasklist.infrastructure.api.routes.tasks_router import router as tasks_router
from tasklist.infrastructure.api.routes.users_router import router as users_router

__all__ = [
    "lists_router",
    "tasks_router",
    "users_router",
]
