"""User API routes.

Provides endpoints for signup, login and access token refresh. Signup and
login open a new refresh-token session and return both tokens in the
``x-access-token`` and ``x-refresh-token`` response headers.
"""

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from tasklist.core.logging import get_logger
from tasklist.domain.services import (
    CredentialService,
    SessionManager,
    default_password_validator,
)
from tasklist.infrastructure.api.dependencies import DbSession, ValidRefreshSession
from tasklist.infrastructure.api.schemas import (
    AccessTokenResponse,
    CredentialsRequest,
    UserResponse,
)
from tasklist.infrastructure.auth import token_issuer

logger = get_logger(__name__)

router = APIRouter()

ACCESS_TOKEN_HEADER = "x-access-token"
REFRESH_TOKEN_HEADER = "x-refresh-token"


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=UserResponse,
    responses={
        400: {"description": "Validation error or email already registered"},
    },
)
async def signup(
    request: CredentialsRequest,
    response: Response,
    session: DbSession,
) -> UserResponse | JSONResponse:
    """Register a new user and open their first session.

    Flow:
    1. Validate password length
    2. Create the user (password hashed on insert)
    3. Create a refresh-token session
    4. Sign an access token
    5. Return the user with both tokens as headers
    """
    password_errors = default_password_validator.validate(request.password)
    if password_errors:
        logger.info(
            "Signup failed: password validation",
            error_count=len(password_errors),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Validation error",
                "details": [
                    {"field": e.field, "message": e.message, "code": e.code}
                    for e in password_errors
                ],
            },
        )

    user = await CredentialService(session).register(request.email, request.password)

    refresh_token = await SessionManager(session).create_session(user)
    access_token = token_issuer.issue_access_token(user.id)

    response.headers[REFRESH_TOKEN_HEADER] = refresh_token
    response.headers[ACCESS_TOKEN_HEADER] = access_token

    logger.info("User signed up", user_id=user.id)
    return UserResponse.from_model(user)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid email or password"},
    },
)
async def login(
    request: CredentialsRequest,
    response: Response,
    session: DbSession,
) -> UserResponse:
    """Authenticate with email and password and open a new session."""
    user = await CredentialService(session).find_by_credentials(
        request.email, request.password
    )

    refresh_token = await SessionManager(session).create_session(user)
    access_token = token_issuer.issue_access_token(user.id)

    response.headers[REFRESH_TOKEN_HEADER] = refresh_token
    response.headers[ACCESS_TOKEN_HEADER] = access_token

    logger.info("User logged in", user_id=user.id)
    return UserResponse.from_model(user)


@router.get(
    "/me/access-token",
    status_code=status.HTTP_200_OK,
    response_model=AccessTokenResponse,
    responses={
        401: {"description": "Unknown user or invalid session"},
    },
)
async def refresh_access_token(
    refresh_session: ValidRefreshSession,
    response: Response,
) -> AccessTokenResponse:
    """Exchange a valid refresh-token session for a new access token.

    The session itself is left unchanged; the refresh token stays usable
    until it expires.
    """
    user_id = refresh_session.user.id
    access_token = token_issuer.issue_access_token(user_id)

    response.headers[ACCESS_TOKEN_HEADER] = access_token

    logger.info("Access token refreshed", user_id=user_id)
    return AccessTokenResponse(access_token=access_token)
