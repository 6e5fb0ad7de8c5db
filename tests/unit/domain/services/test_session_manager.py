"""Unit tests for refresh-token session lifecycle."""

from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from sqlalchemy.exc import SQLAlchemyError

from tasklist.domain.exceptions import PersistenceError
from tasklist.domain.services import CredentialService, SessionManager
from tasklist.infrastructure.persistence.repositories import (
    SessionRepository,
    UserRepository,
)

TEN_DAYS = 10 * 24 * 60 * 60


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest_asyncio.fixture
async def user(db_session):
    return await CredentialService(db_session).register("sessions@example.com", "12345678")


@pytest.mark.asyncio
async def test_create_session_appends_and_persists(db_session, user, clock):
    manager = SessionManager(db_session, clock=clock)

    token = await manager.create_session(user)

    assert len(token) == 128
    assert [s.token for s in user.sessions] == [token]
    assert user.sessions[0].expires_at == clock.now + TEN_DAYS
    assert await SessionRepository(db_session).count_for_user(user.id) == 1


@pytest.mark.asyncio
async def test_sessions_accumulate_in_creation_order(db_session, user, clock):
    manager = SessionManager(db_session, clock=clock)

    first = await manager.create_session(user)
    clock.advance(60)
    second = await manager.create_session(user)

    reloaded = await UserRepository(db_session).find_by_id_and_token(user.id, second)
    assert [s.token for s in reloaded.sessions] == [first, second]


@pytest.mark.asyncio
async def test_is_session_valid(db_session, user, clock):
    manager = SessionManager(db_session, clock=clock)
    token = await manager.create_session(user)

    assert manager.is_session_valid(user, token) is True
    assert manager.is_session_valid(user, "0" * 128) is False


@pytest.mark.asyncio
async def test_session_invalid_at_exact_expiry(db_session, user, clock):
    manager = SessionManager(db_session, clock=clock)
    token = await manager.create_session(user)

    clock.advance(TEN_DAYS - 1)
    assert manager.is_session_valid(user, token) is True

    clock.advance(1)
    assert manager.is_session_valid(user, token) is False


@pytest.mark.asyncio
async def test_validation_does_not_remove_expired_sessions(db_session, user, clock):
    manager = SessionManager(db_session, clock=clock)
    token = await manager.create_session(user)

    clock.advance(TEN_DAYS + 1)
    manager.is_session_valid(user, token)

    assert await SessionRepository(db_session).count_for_user(user.id) == 1


def test_has_expired(clock):
    manager = SessionManager(AsyncMock(), clock=clock)

    assert manager.has_expired(clock.now - 1) is True
    assert manager.has_expired(clock.now) is True
    assert manager.has_expired(clock.now + 1) is False


@pytest.mark.asyncio
async def test_prune_expired_on_create(db_session, user, clock):
    manager = SessionManager(db_session, clock=clock, prune_expired=True)
    old_token = await manager.create_session(user)

    clock.advance(TEN_DAYS + 1)
    new_token = await manager.create_session(user)

    assert [s.token for s in user.sessions] == [new_token]
    assert old_token != new_token
    assert await SessionRepository(db_session).count_for_user(user.id) == 1


@pytest.mark.asyncio
async def test_no_pruning_by_default(db_session, user, clock):
    manager = SessionManager(db_session, clock=clock)
    await manager.create_session(user)

    clock.advance(TEN_DAYS + 1)
    await manager.create_session(user)

    assert await SessionRepository(db_session).count_for_user(user.id) == 2


@pytest.mark.asyncio
async def test_store_failure_raises_persistence_error(db_session, user, clock):
    manager = SessionManager(db_session, clock=clock)

    with patch.object(db_session, "commit", AsyncMock(side_effect=SQLAlchemyError("disk full"))):
        with pytest.raises(PersistenceError) as exc_info:
            await manager.create_session(user)

    assert exc_info.value.message.startswith("Failed to save session to database.")
    assert "disk full" in exc_info.value.message


@pytest.mark.asyncio
async def test_delete_expired_sessions(db_session, user, clock):
    manager = SessionManager(db_session, clock=clock)
    await manager.create_session(user)
    clock.advance(TEN_DAYS + 1)
    await manager.create_session(user)

    deleted = await SessionRepository(db_session).delete_expired(clock.now)
    await db_session.commit()

    assert deleted == 1
    assert await SessionRepository(db_session).count_for_user(user.id) == 1
