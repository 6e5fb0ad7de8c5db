"""Authentication infrastructure components.

This module provides password hashing and token issuance.
"""

from tasklist.domain.exceptions import EntropyError, InvalidTokenError, SigningError
from tasklist.infrastructure.auth.password_hasher import (
    dummy_password_hash,
    hash_password,
    needs_rehash,
    verify_password,
)
from tasklist.infrastructure.auth.token_issuer import TokenIssuer, token_issuer

__all__ = [
    "EntropyError",
    "InvalidTokenError",
    "SigningError",
    "TokenIssuer",
    "dummy_password_hash",
    "hash_password",
    "needs_rehash",
    "token_issuer",
    "verify_password",
]
