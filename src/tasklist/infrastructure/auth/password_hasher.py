"""Password hashing utility using Argon2.

Provides salted password hashing and constant-time verification using the
Argon2id algorithm. The work factor comes from ``password_hash_cost``.
"""

from functools import lru_cache

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from tasklist.core.config import get_settings


@lru_cache
def _get_hasher(time_cost: int) -> PasswordHasher:
    return PasswordHasher(time_cost=time_cost)


def get_hasher() -> PasswordHasher:
    """Get the password hasher for the configured cost factor."""
    return _get_hasher(get_settings().password_hash_cost)


@lru_cache
def _dummy_password_hash(time_cost: int) -> str:
    return _get_hasher(time_cost).hash("dummy-password-for-timing")


def dummy_password_hash() -> str:
    """Hash verified against when no user matches, so both paths cost the same."""
    return _dummy_password_hash(get_settings().password_hash_cost)


def hash_password(password: str) -> str:
    """Hash a password using Argon2id.

    Args:
        password: The plaintext password to hash.

    Returns:
        The hashed password string.

    Example:
        >>> hashed = hash_password("12345678")
        >>> hashed.startswith("$argon2id$")
        True
    """
    return get_hasher().hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a hash.

    Uses constant-time comparison to prevent timing attacks.

    Args:
        password: The plaintext password to verify.
        hashed: The hashed password to verify against.

    Returns:
        True if the password matches, False otherwise.
    """
    try:
        return get_hasher().verify(hashed, password)
    except (VerificationError, InvalidHashError):
        return False


def needs_rehash(hashed: str) -> bool:
    """Check if a password hash was produced with different parameters.

    Args:
        hashed: The hashed password to check.

    Returns:
        True if the hash should be updated, False otherwise.
    """
    return get_hasher().check_needs_rehash(hashed)
