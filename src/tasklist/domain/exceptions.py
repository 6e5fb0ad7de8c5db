"""Exceptions raised by the Tasklist domain and auth layers.

The API layer maps each family onto an HTTP status; see
``tasklist.infrastructure.api.app.register_exception_handlers``.
"""


class TasklistError(Exception):
    """Base class for all Tasklist errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(TasklistError):
    """Raised when a required field is missing or malformed."""

    pass


class AuthenticationError(TasklistError):
    """Raised when an email/password pair does not match a user."""

    pass


class AuthorizationError(TasklistError):
    """Raised when a token or session does not grant access."""

    pass


class ResourceNotFoundError(AuthorizationError):
    """Raised when a list or task is absent or not owned by the caller."""

    pass


class PersistenceError(TasklistError):
    """Raised when the store rejects a write."""

    pass


class TokenError(TasklistError):
    """Base class for token primitive failures."""

    pass


class SigningError(TokenError):
    """Raised when an access token cannot be signed."""

    pass


class InvalidTokenError(TokenError):
    """Raised when an access token has a bad signature, is malformed or has expired."""

    pass


class EntropyError(TokenError):
    """Raised when the random source fails while generating a refresh token."""

    pass
