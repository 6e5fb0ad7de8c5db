"""Access and refresh token issuance.

Access tokens are short-lived HS256 JWTs whose subject is the user ID.
Refresh tokens are opaque random strings; their lifetime is tracked by the
session they are stored in, not by the token itself.
"""

import secrets
from datetime import datetime, timedelta, timezone

import jwt

from tasklist.core.config import get_settings
from tasklist.domain.exceptions import EntropyError, InvalidTokenError, SigningError


class TokenIssuer:
    """Service for creating and validating session tokens."""

    ALGORITHM = "HS256"
    TOKEN_TYPE = "access"

    def __init__(self, secret_key: str | None = None, issuer: str | None = None) -> None:
        """Initialize the token issuer.

        Args:
            secret_key: Secret key for signing tokens. If not provided,
                        uses the configured secret key from settings.
            issuer: Value of the ``iss`` claim. Defaults to the configured issuer.
        """
        self._secret_key = secret_key
        self._issuer = issuer

    @property
    def secret_key(self) -> str:
        """Get the secret key for signing tokens."""
        if self._secret_key:
            return self._secret_key
        return get_settings().secret_key

    @property
    def issuer(self) -> str:
        if self._issuer:
            return self._issuer
        return get_settings().jwt_issuer

    def issue_access_token(
        self,
        user_id: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token for a user.

        Args:
            user_id: The user's unique identifier.
            expires_delta: Custom expiration time. Defaults to config value.

        Returns:
            Encoded JWT access token.

        Raises:
            SigningError: If the token cannot be encoded.
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=get_settings().access_token_expire_minutes)

        now = datetime.now(timezone.utc)
        payload = {
            "iss": self.issuer,
            "sub": user_id,
            "iat": now,
            "exp": now + expires_delta,
            "type": self.TOKEN_TYPE,
        }

        try:
            return jwt.encode(payload, self.secret_key, algorithm=self.ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise SigningError("Failed to sign access token") from e

    def verify_access_token(self, token: str) -> str:
        """Validate an access token and return its subject.

        Bad signatures, malformed tokens and expired tokens all raise the
        same error.

        Args:
            token: The encoded JWT access token.

        Returns:
            The user ID the token was issued for.

        Raises:
            InvalidTokenError: If the token is invalid or expired.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self.issuer,
                options={"require": ["exp", "sub"]},
            )
        except jwt.PyJWTError as e:
            raise InvalidTokenError("Invalid or expired access token") from e

        if payload.get("type") != self.TOKEN_TYPE:
            raise InvalidTokenError("Invalid or expired access token")
        return payload["sub"]

    def issue_refresh_token(self, nbytes: int | None = None) -> str:
        """Create an opaque refresh token.

        Args:
            nbytes: Number of random bytes. Defaults to config value (64),
                    giving a 128 character hex string.

        Returns:
            Hex-encoded random token.

        Raises:
            EntropyError: If the operating system random source fails.
        """
        if nbytes is None:
            nbytes = get_settings().refresh_token_bytes
        try:
            return secrets.token_hex(nbytes)
        except (OSError, NotImplementedError) as e:
            raise EntropyError("Failed to generate refresh token") from e


# Default token issuer instance
token_issuer = TokenIssuer()
