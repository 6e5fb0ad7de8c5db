"""Refresh-token session lifecycle.

A session is a (refresh token, expiry) pair stored on the user. Sessions are
appended on signup and login, checked when an access token is requested, and
never removed on validation.
"""

import time
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.core.config import get_settings
from tasklist.core.logging import get_logger
from tasklist.domain.exceptions import PersistenceError
from tasklist.infrastructure.auth.token_issuer import TokenIssuer, token_issuer
from tasklist.infrastructure.persistence.models import UserModel, UserSessionModel

logger = get_logger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class SessionManager:
    """Creates and validates refresh-token sessions for users."""

    def __init__(
        self,
        session: AsyncSession,
        issuer: TokenIssuer | None = None,
        clock: Callable[[], float] = time.time,
        prune_expired: bool | None = None,
    ) -> None:
        """Initialize the session manager.

        Args:
            session: Database session used to persist new sessions.
            issuer: Token issuer for refresh tokens. Defaults to the shared instance.
            clock: Returns the current time in seconds since the epoch.
            prune_expired: Drop the user's expired sessions before appending a
                new one. Defaults to the ``prune_expired_sessions`` setting.
        """
        self._session = session
        self._issuer = issuer or token_issuer
        self._clock = clock
        if prune_expired is None:
            prune_expired = get_settings().prune_expired_sessions
        self._prune_expired = prune_expired

    def now(self) -> float:
        return self._clock()

    def refresh_token_expiry(self) -> float:
        """Absolute expiry for a session created now."""
        days = get_settings().refresh_token_expire_days
        return self.now() + days * SECONDS_PER_DAY

    def has_expired(self, expires_at: float) -> bool:
        """Check whether an expiry instant has been reached."""
        return expires_at <= self.now()

    def is_session_valid(self, user: UserModel, refresh_token: str) -> bool:
        """Check that the user holds an unexpired session for a refresh token.

        Expects ``user.sessions`` to be loaded, as it is for users returned
        by ``UserRepository.find_by_id_and_token``.

        Args:
            user: The user whose sessions are searched.
            refresh_token: Raw refresh token from the client.

        Returns:
            True if a matching session has not expired.
        """
        return any(
            stored.token == refresh_token and not self.has_expired(stored.expires_at)
            for stored in user.sessions
        )

    async def create_session(self, user: UserModel) -> str:
        """Append a new session to the user and persist it.

        Args:
            user: The user the session belongs to.

        Returns:
            The raw refresh token of the new session.

        Raises:
            EntropyError: If the refresh token cannot be generated.
            PersistenceError: If the session cannot be saved.
        """
        refresh_token = self._issuer.issue_refresh_token()
        expires_at = self.refresh_token_expiry()

        sessions = await user.awaitable_attrs.sessions
        if self._prune_expired:
            self._remove_expired(sessions)
        sessions.append(UserSessionModel(token=refresh_token, expires_at=expires_at))

        try:
            await self._session.flush()
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.warning(
                "Failed to save session",
                user_id=user.id,
                exc_type=type(e).__name__,
            )
            raise PersistenceError(f"Failed to save session to database.\n{e}") from e

        logger.info("Session created", user_id=user.id, session_count=len(sessions))
        return refresh_token

    def _remove_expired(self, sessions: list[UserSessionModel]) -> None:
        expired = [stored for stored in sessions if self.has_expired(stored.expires_at)]
        for stored in expired:
            sessions.remove(stored)
        if expired:
            logger.info("Pruned expired sessions", count=len(expired))
