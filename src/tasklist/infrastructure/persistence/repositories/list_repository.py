"""Repository for list database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.infrastructure.persistence.models import ListModel


class ListRepository:
    """Repository for list database operations.

    Every read and write is filtered by the owning user.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, task_list: ListModel) -> ListModel:
        """Create a new list."""
        self.session.add(task_list)
        await self.session.flush()
        return task_list

    async def list_for_user(self, user_id: str) -> list[ListModel]:
        """Get all lists owned by a user, oldest first.

        Args:
            user_id: Owning user ID.

        Returns:
            List of list models.
        """
        result = await self.session.execute(
            select(ListModel)
            .where(ListModel.user_id == user_id)
            .order_by(ListModel.created_at, ListModel.id)
        )
        return list(result.scalars().all())

    async def get_owned(self, list_id: str, user_id: str) -> ListModel | None:
        """Get a list by ID if it belongs to the user.

        Args:
            list_id: List ID.
            user_id: Owning user ID.

        Returns:
            List model if found and owned, None otherwise.
        """
        result = await self.session.execute(
            select(ListModel).where(
                ListModel.id == list_id,
                ListModel.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def update(self, task_list: ListModel) -> ListModel:
        """Flush pending changes to a list."""
        if task_list not in self.session:
            self.session.add(task_list)
        await self.session.flush()
        return task_list

    async def delete(self, task_list: ListModel) -> None:
        """Delete a list row.

        Callers remove the list's tasks first with
        ``TaskRepository.delete_for_list``.
        """
        await self.session.delete(task_list)
        await self.session.flush()
