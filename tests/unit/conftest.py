import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.in_memory_store import InMemoryStore
from src.adapter.services.unit_of_work import InMemoryUnitOfWork
from src.domain.entities import (
    ApiKey,
    AttendanceRecord,
    Enrollment,
    SchoolClass,
    Session,
    Student,
    User,
)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def uow_factory(store):
    """Fresh unit of work over the shared test store on every call"""
    return lambda: InMemoryUnitOfWork(store)


REPOSITORY_BY_ENTITY = {
    User: "users",
    ApiKey: "api_keys",
    SchoolClass: "classes",
    Student: "students",
    Enrollment: "enrollments",
    AttendanceRecord: "attendance",
    Session: "sessions",
}


@pytest.fixture
def seed(uow_factory):
    """Write entities straight through the repositories in one committed unit of work"""

    async def _seed(*entities):
        async with uow_factory() as uow:
            for entity in entities:
                repository = getattr(uow, REPOSITORY_BY_ENTITY[type(entity)])
                await repository.create(entity)
            await uow.commit()
        return entities

    return _seed
