"""Credential checks and user registration."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.core.logging import get_logger
from tasklist.domain.exceptions import AuthenticationError, ValidationError
from tasklist.infrastructure.auth import dummy_password_hash, needs_rehash, verify_password
from tasklist.infrastructure.persistence.models import UserModel
from tasklist.infrastructure.persistence.repositories import UserRepository

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class CredentialService:
    """Looks users up by credentials and registers new ones."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._users = UserRepository(session)

    async def register(self, email: str, password: str) -> UserModel:
        """Create a user from a plaintext password.

        The password is hashed by the ``before_insert`` listener; it is never
        written in plaintext.

        Raises:
            ValidationError: If the email is already registered.
        """
        if await self._users.email_exists(email):
            raise ValidationError("Email is already registered")

        user = UserModel(email=email, password=password, sessions=[])
        try:
            await self._users.create(user)
            await self._session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same email
            await self._session.rollback()
            raise ValidationError("Email is already registered") from e

        logger.info("User registered", user_id=user.id)
        return user

    async def find_by_credentials(self, email: str, password: str) -> UserModel:
        """Get the user matching an email/password pair.

        Unknown emails and wrong passwords fail identically, and a dummy hash
        is verified for unknown emails so both take the same time.

        Args:
            email: Exact email address.
            password: Plaintext password.

        Returns:
            The matching user.

        Raises:
            AuthenticationError: If no user matches the credentials.
        """
        user = await self._users.get_by_email(email)

        if user is None:
            verify_password(password, dummy_password_hash())
            logger.info("Credential check failed: unknown email")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(password, user.password):
            logger.info("Credential check failed: wrong password", user_id=user.id)
            raise AuthenticationError(INVALID_CREDENTIALS)

        if needs_rehash(user.password):
            # Hashed again by the before_update listener on next flush
            user.password = password

        return user
