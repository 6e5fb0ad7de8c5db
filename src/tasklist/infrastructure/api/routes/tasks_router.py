"""Task API routes.

Tasks are addressed through their list. Every endpoint first checks that the
list belongs to the caller; a foreign or missing list gives 404.
"""

from fastapi import APIRouter, status
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.core.logging import get_logger
from tasklist.domain.exceptions import ResourceNotFoundError
from tasklist.infrastructure.api.dependencies import AuthenticatedUser, DbSession
from tasklist.infrastructure.api.schemas import (
    MessageResponse,
    TaskCreate,
    TaskResponse,
    TaskUpdate,
)
from tasklist.infrastructure.persistence.models import ListModel, TaskModel
from tasklist.infrastructure.persistence.repositories import (
    ListRepository,
    TaskRepository,
)

logger = get_logger(__name__)

router = APIRouter()

LIST_NOT_FOUND = "List not found"
TASK_NOT_FOUND = "Task not found"


async def _get_owned_list(session: AsyncSession, list_id: str, user_id: str) -> ListModel:
    task_list = await ListRepository(session).get_owned(list_id, user_id)
    if task_list is None:
        logger.info("Task access rejected: list not found", list_id=list_id, user_id=user_id)
        raise ResourceNotFoundError(LIST_NOT_FOUND)
    return task_list


async def _get_task(repo: TaskRepository, task_id: str, list_id: str) -> TaskModel:
    task = await repo.get_in_list(task_id, list_id)
    if task is None:
        raise ResourceNotFoundError(TASK_NOT_FOUND)
    return task


@router.get("", response_model=list[TaskResponse])
async def get_tasks(
    list_id: str,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> list[TaskResponse]:
    """Get every task in one of the caller's lists."""
    await _get_owned_list(session, list_id, current_user.user_id)
    tasks = await TaskRepository(session).list_for_list(list_id)
    return [TaskResponse.from_model(task) for task in tasks]


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=TaskResponse,
    responses={
        400: {"description": "Validation error"},
        404: {"description": "List not found"},
    },
)
async def create_task(
    list_id: str,
    data: TaskCreate,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> TaskResponse:
    """Create an uncompleted task in one of the caller's lists."""
    await _get_owned_list(session, list_id, current_user.user_id)

    task = TaskModel(title=data.title, list_id=list_id, completed=False)
    await TaskRepository(session).create(task)
    await session.commit()

    logger.info("Task created", task_id=task.id, list_id=list_id)
    return TaskResponse.from_model(task)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    responses={404: {"description": "List or task not found"}},
)
async def get_task(
    list_id: str,
    task_id: str,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> TaskResponse:
    """Get a single task."""
    await _get_owned_list(session, list_id, current_user.user_id)
    task = await _get_task(TaskRepository(session), task_id, list_id)
    return TaskResponse.from_model(task)


@router.patch(
    "/{task_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={404: {"description": "List or task not found"}},
)
async def update_task(
    list_id: str,
    task_id: str,
    data: TaskUpdate,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> MessageResponse:
    """Update a task's title and/or completion flag.

    The owning list cannot be changed.
    """
    await _get_owned_list(session, list_id, current_user.user_id)
    repo = TaskRepository(session)
    task = await _get_task(repo, task_id, list_id)

    if data.title is not None:
        task.title = data.title
    if data.completed is not None:
        task.completed = data.completed
    await repo.update(task)
    await session.commit()

    logger.info("Task updated", task_id=task_id, list_id=list_id)
    return MessageResponse(message="Updated successfully.")


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_200_OK,
    response_model=TaskResponse,
    responses={404: {"description": "List or task not found"}},
)
async def delete_task(
    list_id: str,
    task_id: str,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> TaskResponse:
    """Delete a task and return it."""
    await _get_owned_list(session, list_id, current_user.user_id)
    repo = TaskRepository(session)
    task = await _get_task(repo, task_id, list_id)

    removed = TaskResponse.from_model(task)
    await repo.delete(task)
    await session.commit()

    logger.info("Task deleted", task_id=task_id, list_id=list_id)
    return removed
