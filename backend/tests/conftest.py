import os

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from main import app
from shared.dependencies import get_db, get_user_events
from shared.infrastructure.database import Base

import users.infrastructure.orm_models  # noqa: F401


class RecordingUserEvents:
    def __init__(self):
        self.changes = []

    async def users_changed(self, change):
        self.changes.append(change)


@pytest.fixture
def database_url(tmp_path):
    return os.environ.get("TEST_DATABASE_URL") or f"sqlite+aiosqlite:///{tmp_path / 'users.db'}"


@pytest.fixture
async def test_engine(database_url):
    engine = create_async_engine(database_url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


async def create_user(client: AsyncClient, **fields) -> None:
    """POST a user as form data and assert it was accepted."""
    resp = await client.post("/user", data=fields)
    assert resp.status_code == 201, resp.text


@pytest.fixture
async def db(test_engine):
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def events():
    return RecordingUserEvents()


@pytest.fixture(autouse=True)
async def override_dependencies(test_engine, events):
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async def _override():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override
    app.dependency_overrides[get_user_events] = lambda: events
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
