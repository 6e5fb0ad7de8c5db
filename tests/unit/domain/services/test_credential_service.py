"""Unit tests for credential lookup and registration."""

import pytest
from argon2 import PasswordHasher
from sqlalchemy import update

from tasklist.domain.exceptions import AuthenticationError, ValidationError
from tasklist.domain.services import CredentialService
from tasklist.domain.services.credential_service import INVALID_CREDENTIALS
from tasklist.infrastructure.auth import needs_rehash, verify_password
from tasklist.infrastructure.persistence.models import UserModel


@pytest.mark.asyncio
async def test_register_hashes_password(db_session):
    user = await CredentialService(db_session).register("a@example.com", "12345678")

    assert user.id
    assert user.password != "12345678"
    assert verify_password("12345678", user.password)


@pytest.mark.asyncio
async def test_register_duplicate_email(db_session):
    service = CredentialService(db_session)
    await service.register("dup@example.com", "12345678")

    with pytest.raises(ValidationError) as exc_info:
        await service.register("dup@example.com", "87654321")

    assert exc_info.value.message == "Email is already registered"


@pytest.mark.asyncio
async def test_find_by_credentials(db_session):
    service = CredentialService(db_session)
    created = await service.register("login@example.com", "12345678")

    found = await service.find_by_credentials("login@example.com", "12345678")

    assert found.id == created.id


@pytest.mark.asyncio
async def test_find_by_credentials_wrong_password(db_session):
    service = CredentialService(db_session)
    await service.register("login@example.com", "12345678")

    with pytest.raises(AuthenticationError) as exc_info:
        await service.find_by_credentials("login@example.com", "wrong-password")

    assert exc_info.value.message == INVALID_CREDENTIALS


@pytest.mark.asyncio
async def test_find_by_credentials_unknown_email(db_session):
    """Unknown emails fail with the same message as wrong passwords."""
    with pytest.raises(AuthenticationError) as exc_info:
        await CredentialService(db_session).find_by_credentials("nobody@example.com", "12345678")

    assert exc_info.value.message == INVALID_CREDENTIALS


@pytest.mark.asyncio
async def test_find_by_credentials_email_is_exact(db_session):
    service = CredentialService(db_session)
    await service.register("case@example.com", "12345678")

    with pytest.raises(AuthenticationError):
        await service.find_by_credentials("Case@example.com", "12345678")


@pytest.mark.asyncio
async def test_outdated_hash_is_upgraded_on_login(db_session):
    service = CredentialService(db_session)
    user = await service.register("rehash@example.com", "12345678")

    # Store a hash made with different parameters, bypassing the ORM hook
    old_hash = PasswordHasher(time_cost=2).hash("12345678")
    await db_session.execute(
        update(UserModel)
        .where(UserModel.id == user.id)
        .values(password=old_hash)
        .execution_options(synchronize_session=False)
    )
    await db_session.commit()
    await db_session.refresh(user)
    assert needs_rehash(user.password)

    found = await service.find_by_credentials("rehash@example.com", "12345678")
    await db_session.commit()

    assert found.password != old_hash
    assert not needs_rehash(found.password)
    assert verify_password("12345678", found.password)
