from typing import Optional

from fastapi import Depends, status
from fastapi.security import APIKeyCookie, APIKeyHeader

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.in_memory_store import InMemoryStore
from src.adapter.services.unit_of_work import InMemoryUnitOfWork
from src.api.error import ClientError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.api_keys import VerifiedApiKey, VerifyApiKeyUseCase
from src.app.use_cases.auth import AuthenticateSessionUseCase
from src.domain.entities import UserPublic

store = InMemoryStore()

session_cookie = APIKeyCookie(name=ApplicationConfig.SESSION_COOKIE_NAME, auto_error=False)
api_key_header = APIKeyHeader(name=ApplicationConfig.API_KEY_HEADER, auto_error=False)


def get_store() -> InMemoryStore:
    return store


def unit_of_work_factory() -> UnitOfWork:
    return InMemoryUnitOfWork(store)


async def get_unit_of_work():
    yield InMemoryUnitOfWork(store)


async def get_verified_api_key(
    raw_key: Optional[str] = Depends(api_key_header),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> VerifiedApiKey:
    """
    Dependency for endpoints that only accept an API key.

    Raises:
        ClientError: 401 if the header is missing or the key is invalid/inactive
    """
    result = await VerifyApiKeyUseCase(uow).execute(raw_key)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)
    return result.value


async def get_current_user(
    session_token: Optional[str] = Depends(session_cookie),
    raw_key: Optional[str] = Depends(api_key_header),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> UserPublic:
    """
    Dependency to resolve the caller from a session cookie or an API key.

    An API key header, when present, takes precedence over the cookie.

    Returns:
        Public view of the authenticated user

    Raises:
        ClientError: 401 for any authentication failure, with no detail
    """
    if raw_key:
        result = await VerifyApiKeyUseCase(uow).execute(raw_key)
        if result.is_ok():
            return result.value.user
    elif session_token:
        result = await AuthenticateSessionUseCase(uow).execute(session_token)
        if result.is_ok():
            return result.value

    raise ClientError(
        Error("UNAUTHORIZED", "Authentication required"),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )
