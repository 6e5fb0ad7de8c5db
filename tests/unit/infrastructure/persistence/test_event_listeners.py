"""Unit tests for the password hashing mapper events."""

import pytest

from tasklist.infrastructure.auth import verify_password
from tasklist.infrastructure.persistence.models import ListModel, UserModel
from tasklist.infrastructure.persistence.repositories import UserRepository


async def _create_user(db_session, email="hook@example.com", password="12345678") -> UserModel:
    user = UserModel(email=email, password=password, sessions=[])
    await UserRepository(db_session).create(user)
    await db_session.commit()
    return user


@pytest.mark.asyncio
async def test_password_hashed_on_insert(db_session):
    user = await _create_user(db_session)

    assert user.password.startswith("$argon2id$")
    assert verify_password("12345678", user.password)


@pytest.mark.asyncio
async def test_unrelated_update_does_not_rehash(db_session):
    user = await _create_user(db_session)
    stored_hash = user.password

    user.email = "renamed@example.com"
    await db_session.commit()

    assert user.password == stored_hash


@pytest.mark.asyncio
async def test_session_append_does_not_rehash(db_session):
    from tasklist.domain.services import SessionManager

    user = await _create_user(db_session)
    stored_hash = user.password

    await SessionManager(db_session).create_session(user)

    assert user.password == stored_hash


@pytest.mark.asyncio
async def test_password_change_is_hashed(db_session):
    user = await _create_user(db_session)
    old_hash = user.password

    user.password = "new-password-123"
    await db_session.commit()

    assert user.password != old_hash
    assert user.password != "new-password-123"
    assert verify_password("new-password-123", user.password)


@pytest.mark.asyncio
async def test_listeners_only_apply_to_users(db_session):
    user = await _create_user(db_session)
    task_list = ListModel(title="$argon2id$ is not a password", user_id=user.id)
    db_session.add(task_list)
    await db_session.commit()

    assert task_list.title == "$argon2id$ is not a password"
