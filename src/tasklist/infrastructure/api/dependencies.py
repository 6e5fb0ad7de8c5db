"""FastAPI dependencies for authentication.

Two gates are provided and chosen per route:

- ``get_current_user`` validates the signed access token in ``x-access-token``.
- ``get_refresh_session`` validates the refresh token in ``x-refresh-token``
  against the sessions stored for the user named in ``_id``.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.core.logging import get_logger
from tasklist.domain.exceptions import AuthorizationError, InvalidTokenError
from tasklist.domain.services import SessionManager
from tasklist.infrastructure.auth import token_issuer
from tasklist.infrastructure.persistence.database import get_db_session
from tasklist.infrastructure.persistence.models import UserModel
from tasklist.infrastructure.persistence.repositories import UserRepository

logger = get_logger(__name__)

USER_NOT_FOUND = "User not found"
SESSION_NOT_VALID = "Refresh token expired or the session is not valid"

DbSession = Annotated[AsyncSession, Depends(get_db_session)]


@dataclass
class CurrentUser:
    """The caller resolved from a valid access token."""

    user_id: str


@dataclass
class RefreshSession:
    """The caller resolved from a valid refresh-token session."""

    user: UserModel
    refresh_token: str


async def get_current_user(
    x_access_token: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """Resolve the caller from the ``x-access-token`` header.

    Raises:
        AuthorizationError: If the token is missing, invalid or expired (401).
    """
    if not x_access_token:
        logger.info("Authentication failed: missing access token")
        raise AuthorizationError("Missing access token")

    try:
        user_id = token_issuer.verify_access_token(x_access_token)
    except InvalidTokenError as e:
        logger.info("Authentication failed: invalid access token")
        raise AuthorizationError(e.message) from e

    return CurrentUser(user_id=user_id)


async def get_refresh_session(
    request: Request,
    session: DbSession,
    x_refresh_token: Annotated[str | None, Header()] = None,
) -> RefreshSession:
    """Resolve the caller from the ``x-refresh-token`` and ``_id`` headers.

    Raises:
        AuthorizationError: If no user holds the token, or the matching
            session has expired (401).
    """
    # Header() would look up "-id"; read the underscore name directly
    user_id = request.headers.get("_id")

    user = None
    if user_id and x_refresh_token:
        user = await UserRepository(session).find_by_id_and_token(user_id, x_refresh_token)

    if user is None:
        logger.info("Refresh rejected: user not found", user_id=user_id)
        raise AuthorizationError(USER_NOT_FOUND)

    if not SessionManager(session).is_session_valid(user, x_refresh_token):
        logger.info("Refresh rejected: session not valid", user_id=user.id)
        raise AuthorizationError(SESSION_NOT_VALID)

    return RefreshSession(user=user, refresh_token=x_refresh_token)


# Type aliases for dependency injection
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
ValidRefreshSession = Annotated[RefreshSession, Depends(get_refresh_session)]
