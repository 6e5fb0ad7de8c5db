"""User repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.infrastructure.persistence.models import UserModel, UserSessionModel


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, user: UserModel) -> UserModel:
        """Create a new user.

        The password is hashed by the ``before_insert`` listener during flush.

        Args:
            user: User model to create.

        Returns:
            Created user model.
        """
        self.session.add(user)
        await self.session.flush()
        return user

    async def get_by_email(self, email: str) -> UserModel | None:
        """Get a user by exact email match.

        Args:
            email: User's email address.

        Returns:
            User model if found, None otherwise.
        """
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Check if an email is already registered."""
        result = await self.session.execute(
            select(UserModel.id).where(UserModel.email == email).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def find_by_id_and_token(self, user_id: str, token: str) -> UserModel | None:
        """Get the user whose session set contains a refresh token.

        Expiry is not checked here; callers decide validity with
        ``SessionManager.is_session_valid``.

        Args:
            user_id: User ID (UUID string).
            token: Raw refresh token.

        Returns:
            User model with sessions loaded if found, None otherwise.
        """
        result = await self.session.execute(
            select(UserModel).where(
                UserModel.id == user_id,
                UserModel.sessions.any(UserSessionModel.token == token),
            )
        )
        return result.scalar_one_or_none()
