"""Domain services for Tasklist.

Services contain business logic that doesn't naturally fit within a single
request handler.
"""

from tasklist.domain.services.credential_service import CredentialService
from tasklist.domain.services.password_validator import (
    PasswordValidationError,
    PasswordValidator,
    default_password_validator,
)
from tasklist.domain.services.session_manager import SessionManager

__all__ = [
    "CredentialService",
    "PasswordValidationError",
    "PasswordValidator",
    "SessionManager",
    "default_password_validator",
]
