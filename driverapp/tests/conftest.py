"""
Centralized Test Configuration.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import Pool, StaticPool

from driverapp.app.main import app
from driverapp.app.db.session import get_db, Base
from driverapp.app.db.seed import ensure_roles

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@event.listens_for(Pool, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable foreign key constraints for SQLite."""
    if 'sqlite' in str(type(dbapi_conn)):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


@pytest.fixture(scope="session", autouse=True)
def apply_overrides():
    """Point the app's session dependency at the test database."""

    async def override_get_db():
        async with TestingSessionLocal() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides = {}


@pytest.fixture(autouse=True)
async def setup_database():
    """Create tables and seed roles before each test, drop them after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestingSessionLocal() as session:
        await ensure_roles(session)

    yield

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client():
    """Async client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def session_factory():
    return TestingSessionLocal


# Shared session for fixture data creation
@pytest.fixture
async def db_session():
    async with TestingSessionLocal() as session:
        yield session


class Api:
    """Thin helpers over the HTTP client for multi-step scenarios."""

    def __init__(self, client):
        self.client = client

    async def register(self, username, email, password="pw", role="user"):
        return await self.client.post(
            "/api/register",
            json={"username": username, "email": email, "password": password, "role": role},
        )

    async def login(self, email, password="pw"):
        response = await self.client.post("/api/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return response.json()["token"]

    @staticmethod
    def bearer(token):
        return {"Authorization": f"Bearer {token}"}

    async def create_trip(self, token, start="A", end="B"):
        return await self.client.post(
            "/api/trips",
            json={"start_location": start, "end_location": end},
            headers=self.bearer(token),
        )


@pytest.fixture
def api(client):
    return Api(client)


@pytest.fixture
async def rider_token(api):
    await api.register("u1", "u1@x.com", role=1)
    return await api.login("u1@x.com")


@pytest.fixture
async def driver_token(api):
    await api.register("d1", "d1@x.com", role=2)
    return await api.login("d1@x.com")
