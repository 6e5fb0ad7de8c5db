"""Unit tests for the password policy."""

from tasklist.domain.services import PasswordValidator, default_password_validator


def test_accepts_minimum_length():
    assert default_password_validator.validate("12345678") == []
    assert default_password_validator.is_valid("12345678") is True


def test_rejects_short_password():
    errors = default_password_validator.validate("1234567")

    assert len(errors) == 1
    assert errors[0].field == "password"
    assert errors[0].code == "password_too_short"
    assert "8" in errors[0].message


def test_custom_minimum_length():
    validator = PasswordValidator(min_length=12)

    assert validator.is_valid("12345678") is False
    assert validator.is_valid("123456789012") is True
