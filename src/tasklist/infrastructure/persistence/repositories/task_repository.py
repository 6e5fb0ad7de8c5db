"""Repository for task database operations."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.infrastructure.persistence.models import TaskModel


class TaskRepository:
    """Repository for task database operations.

    Tasks are always addressed through their list; ownership of the list is
    checked by the caller.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, task: TaskModel) -> TaskModel:
        """Create a new task."""
        self.session.add(task)
        await self.session.flush()
        return task

    async def list_for_list(self, list_id: str) -> list[TaskModel]:
        """Get all tasks in a list, oldest first."""
        result = await self.session.execute(
            select(TaskModel)
            .where(TaskModel.list_id == list_id)
            .order_by(TaskModel.created_at, TaskModel.id)
        )
        return list(result.scalars().all())

    async def get_in_list(self, task_id: str, list_id: str) -> TaskModel | None:
        """Get a task by ID within a specific list.

        Args:
            task_id: Task ID.
            list_id: List ID the task must belong to.

        Returns:
            Task model if found, None otherwise.
        """
        result = await self.session.execute(
            select(TaskModel).where(
                TaskModel.id == task_id,
                TaskModel.list_id == list_id,
            )
        )
        return result.scalar_one_or_none()

    async def update(self, task: TaskModel) -> TaskModel:
        """Flush pending changes to a task."""
        if task not in self.session:
            self.session.add(task)
        await self.session.flush()
        return task

    async def delete(self, task: TaskModel) -> None:
        """Delete a single task."""
        await self.session.delete(task)
        await self.session.flush()

    async def delete_for_list(self, list_id: str) -> int:
        """Delete every task belonging to a list.

        Args:
            list_id: List ID.

        Returns:
            Number of tasks deleted.
        """
        result = await self.session.execute(
            delete(TaskModel).where(TaskModel.list_id == list_id)
        )
        await self.session.flush()
        return result.rowcount
