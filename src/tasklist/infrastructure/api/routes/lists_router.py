"""List API routes.

All endpoints require a valid access token and only ever see lists owned by
the caller. A list owned by someone else is reported as not found.
"""

from fastapi import APIRouter, Response, status

from tasklist.core.logging import get_logger
from tasklist.domain.exceptions import ResourceNotFoundError
from tasklist.infrastructure.api.dependencies import AuthenticatedUser, DbSession
from tasklist.infrastructure.api.schemas import ListCreate, ListResponse, ListUpdate
from tasklist.infrastructure.persistence.models import ListModel
from tasklist.infrastructure.persistence.repositories import (
    ListRepository,
    TaskRepository,
)

logger = get_logger(__name__)

router = APIRouter()

LIST_NOT_FOUND = "List not found"


@router.get("", response_model=list[ListResponse])
async def get_lists(
    current_user: AuthenticatedUser,
    session: DbSession,
) -> list[ListResponse]:
    """Get every list owned by the caller."""
    lists = await ListRepository(session).list_for_user(current_user.user_id)
    return [ListResponse.from_model(task_list) for task_list in lists]


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ListResponse,
    responses={400: {"description": "Validation error"}},
)
async def create_list(
    data: ListCreate,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> ListResponse:
    """Create a list owned by the caller."""
    task_list = ListModel(title=data.title, user_id=current_user.user_id)
    await ListRepository(session).create(task_list)
    await session.commit()

    logger.info("List created", list_id=task_list.id, user_id=current_user.user_id)
    return ListResponse.from_model(task_list)


@router.patch(
    "/{list_id}",
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "List not found"}},
)
async def update_list(
    list_id: str,
    data: ListUpdate,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> Response:
    """Rename a list. The owner cannot be changed."""
    repo = ListRepository(session)
    task_list = await repo.get_owned(list_id, current_user.user_id)
    if task_list is None:
        logger.info("List update rejected: not found", list_id=list_id)
        raise ResourceNotFoundError(LIST_NOT_FOUND)

    if data.title is not None:
        task_list.title = data.title
    await repo.update(task_list)
    await session.commit()

    logger.info("List updated", list_id=list_id)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{list_id}",
    status_code=status.HTTP_200_OK,
    response_model=ListResponse,
    responses={404: {"description": "List not found"}},
)
async def delete_list(
    list_id: str,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> ListResponse:
    """Delete a list and every task in it.

    Returns the removed list. Tasks are deleted in the same transaction,
    before the response is sent.
    """
    repo = ListRepository(session)
    task_list = await repo.get_owned(list_id, current_user.user_id)
    if task_list is None:
        logger.info("List delete rejected: not found", list_id=list_id)
        raise ResourceNotFoundError(LIST_NOT_FOUND)

    removed = ListResponse.from_model(task_list)
    deleted_tasks = await TaskRepository(session).delete_for_list(list_id)
    await repo.delete(task_list)
    await session.commit()

    logger.info("List deleted", list_id=list_id, deleted_tasks=deleted_tasks)
    return removed
