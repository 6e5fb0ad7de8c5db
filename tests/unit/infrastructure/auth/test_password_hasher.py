"""Unit tests for password hashing utilities."""

from argon2 import PasswordHasher

from tasklist.infrastructure.auth.password_hasher import (
    dummy_password_hash,
    hash_password,
    needs_rehash,
    verify_password,
)


class TestHashPassword:
    """Tests for hash_password function."""

    def test_hash_password_returns_argon2_hash(self):
        hashed = hash_password("12345678")

        assert hashed.startswith("$argon2id$")
        assert hashed != "12345678"

    def test_hash_password_different_for_same_input(self):
        """Hashing the same password twice gives different hashes (random salt)."""
        assert hash_password("12345678") != hash_password("12345678")

    def test_hash_uses_configured_cost(self):
        hashed = hash_password("12345678")

        assert ",t=1," in hashed


class TestVerifyPassword:
    """Tests for verify_password function."""

    def test_verify_password_correct(self):
        hashed = hash_password("12345678")

        assert verify_password("12345678", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("12345678")

        assert verify_password("87654321", hashed) is False

    def test_verify_password_invalid_hash(self):
        assert verify_password("12345678", "not-a-hash") is False

    def test_dummy_hash_never_matches_real_passwords(self):
        assert verify_password("12345678", dummy_password_hash()) is False


class TestNeedsRehash:
    def test_current_parameters(self):
        assert needs_rehash(hash_password("12345678")) is False

    def test_different_cost(self):
        stronger = PasswordHasher(time_cost=3).hash("12345678")

        assert needs_rehash(stronger) is True
