"""
Unit tests for session authentication and logout over the in-memory store
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.app.use_cases.auth import (
    AuthenticateSessionUseCase,
    LoginUseCase,
    LogoutUseCase,
    RegisterCommand,
    RegisterUseCase,
)

T0 = datetime(2024, 9, 2, 8, 30, tzinfo=timezone.utc)
TTL = timedelta(days=7)


@pytest.fixture
def login(uow_factory):
    async def _login(username: str = "rivera") -> str:
        await RegisterUseCase(uow_factory()).execute(
            RegisterCommand(username=username, password="SecurePass123!")
        )
        result = await LoginUseCase(uow_factory(), clock=lambda: T0).execute(
            username, "SecurePass123!"
        )
        assert result.is_ok()
        return result.value.session_token

    return _login


@pytest.mark.asyncio
async def test_session_valid_until_expiry_inclusive(uow_factory, login):
    token = await login()

    result = await AuthenticateSessionUseCase(
        uow_factory(), clock=lambda: T0 + TTL
    ).execute(token)

    assert result.is_ok()
    assert result.value.username == "rivera"


@pytest.mark.asyncio
async def test_expired_session_is_rejected_and_evicted(store, uow_factory, login):
    token = await login()
    assert store.count("sessions") == 1

    result = await AuthenticateSessionUseCase(
        uow_factory(), clock=lambda: T0 + TTL + timedelta(microseconds=1)
    ).execute(token)

    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
    assert store.count("sessions") == 0


@pytest.mark.asyncio
async def test_unknown_or_missing_token_is_rejected(uow_factory, login):
    await login()

    for token in ("not-a-real-token", "", None):
        result = await AuthenticateSessionUseCase(
            uow_factory(), clock=lambda: T0
        ).execute(token)
        assert result.is_err()
        assert result.error.code == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_session_of_deleted_user_is_rejected(store, uow_factory, login):
    token = await login()
    store.tables["users"].clear()

    result = await AuthenticateSessionUseCase(uow_factory(), clock=lambda: T0).execute(token)

    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_logout_ends_session_and_is_idempotent(store, uow_factory, login):
    token = await login()

    first = await LogoutUseCase(uow_factory()).execute(token)
    second = await LogoutUseCase(uow_factory()).execute(token)

    assert first.is_ok()
    assert second.is_ok()
    assert store.count("sessions") == 0
    result = await AuthenticateSessionUseCase(uow_factory(), clock=lambda: T0).execute(token)
    assert result.is_err()


@pytest.mark.asyncio
async def test_each_login_opens_its_own_session(store, uow_factory, login):
    first = await login()
    second = await LoginUseCase(uow_factory(), clock=lambda: T0).execute(
        "rivera", "SecurePass123!"
    )

    assert second.value.session_token != first
    assert store.count("sessions") == 2
