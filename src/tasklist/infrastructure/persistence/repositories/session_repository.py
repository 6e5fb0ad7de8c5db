"""Repository for user session operations."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.infrastructure.persistence.models import UserSessionModel


class SessionRepository:
    """Repository for bulk session maintenance.

    Appending a session goes through ``UserModel.sessions``; this repository
    covers queries that span users.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def count_for_user(self, user_id: str) -> int:
        """Count the sessions stored for a user."""
        result = await self._session.execute(
            select(func.count(UserSessionModel.id)).where(UserSessionModel.user_id == user_id)
        )
        return result.scalar_one() or 0

    async def delete_expired(self, now: float) -> int:
        """Delete every session whose expiry is at or before ``now``.

        Args:
            now: Current time in seconds since the epoch.

        Returns:
            Number of sessions deleted.
        """
        result = await self._session.execute(
            delete(UserSessionModel)
            .where(UserSessionModel.expires_at <= now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
