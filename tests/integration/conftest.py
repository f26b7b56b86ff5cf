import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from src.adapter.services.in_memory_store import InMemoryStore
from src.adapter.services.unit_of_work import InMemoryUnitOfWork
from src.api.app import create_app
from src.depends import get_unit_of_work

PASSWORD = "SecurePass123!"


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def app(store):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield InMemoryUnitOfWork(store)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


def _client(app) -> AsyncClient:
    # Relative request paths resolve under the API prefix
    return AsyncClient(
        transport=ASGITransport(app=app),
        base_url=f"http://test{ApplicationConfig.API_PREFIX}",
    )


@pytest_asyncio.fixture
async def client(app):
    async with _client(app) as ac:
        yield ac


@pytest_asyncio.fixture
async def other_client(app):
    """Second cookie jar against the same app and store"""
    async with _client(app) as ac:
        yield ac


@pytest.fixture
def login_as():
    async def _login_as(client: AsyncClient, username: str) -> dict:
        response = await client.post(
            "/auth/register", json={"username": username, "password": PASSWORD}
        )
        assert response.status_code == 201
        response = await client.post(
            "/auth/login", json={"username": username, "password": PASSWORD}
        )
        assert response.status_code == 200
        return response.json()

    return _login_as


@pytest_asyncio.fixture
async def logged_in(client, login_as):
    return await login_as(client, "rivera")


@pytest.fixture
def create_class():
    async def _create_class(client: AsyncClient, **overrides) -> dict:
        payload = {
            "name": "Algebra I",
            "instructor": "Ms. Rivera",
            "schedule": '{"days": ["mon", "wed"], "time": "09:00"}',
            **overrides,
        }
        response = await client.post("/classes", json=payload)
        assert response.status_code == 201
        return response.json()

    return _create_class


@pytest.fixture
def create_student():
    async def _create_student(client: AsyncClient, student_id: str, **overrides) -> dict:
        payload = {
            "student_id": student_id,
            "first_name": "Sam",
            "last_name": "Lee",
            **overrides,
        }
        response = await client.post("/students", json=payload)
        assert response.status_code == 201
        return response.json()

    return _create_student
