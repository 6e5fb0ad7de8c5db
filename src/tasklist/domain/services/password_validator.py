"""Password validation service.

Validates a plaintext password before it is hashed and stored. The only
policy rule is a minimum length.
"""

from dataclasses import dataclass

from tasklist.core.config import get_settings


@dataclass(frozen=True)
class PasswordValidationError:
    """Represents a password validation error.

    Attributes:
        field: The field name (always 'password').
        message: Human-readable error message.
        code: Machine-readable error code.
    """

    field: str
    message: str
    code: str


class PasswordValidator:
    """Validates password length."""

    def __init__(self, min_length: int | None = None) -> None:
        """Initialize the password validator.

        Args:
            min_length: Minimum password length. Defaults to the configured value.
        """
        self._min_length = min_length

    @property
    def min_length(self) -> int:
        if self._min_length is not None:
            return self._min_length
        return get_settings().password_min_length

    def validate(self, password: str) -> list[PasswordValidationError]:
        """Validate a password against the policy.

        Args:
            password: The password to validate.

        Returns:
            List of validation errors. Empty list if password is valid.
        """
        errors: list[PasswordValidationError] = []

        if len(password) < self.min_length:
            errors.append(
                PasswordValidationError(
                    field="password",
                    message=f"Password must be at least {self.min_length} characters",
                    code="password_too_short",
                )
            )

        return errors

    def is_valid(self, password: str) -> bool:
        """Check if a password is valid."""
        return len(self.validate(password)) == 0


# Default validator instance
default_password_validator = PasswordValidator()
