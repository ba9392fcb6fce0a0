from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from feedback_desk.config import Settings
from feedback_desk.main import create_app
from feedback_desk.services import FeedbackService
from feedback_desk.storage import FeedbackStore


VALID_FEEDBACK = {
    "name": "Asha Rao",
    "email": "asha@example.com",
    "mobile": "9876543210",
    "message": "Loved the service.",
    "rating": 5,
}


@pytest.fixture()
def valid_feedback() -> dict:
    return dict(VALID_FEEDBACK)


@pytest.fixture()
def test_db_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture()
def settings(test_db_url: str) -> Settings:
    return Settings(database_url=test_db_url)


@pytest_asyncio.fixture()
async def store(test_db_url: str) -> AsyncIterator[FeedbackStore]:
    feedback_store = FeedbackStore(test_db_url)
    await feedback_store.init()
    yield feedback_store
    await feedback_store.close()


@pytest.fixture()
def service(store: FeedbackStore) -> FeedbackService:
    return FeedbackService(store)


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest_asyncio.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac


@pytest_asyncio.fixture()
async def admin_token(client: AsyncClient) -> str:
    resp = await client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    return resp.json()["token"]
