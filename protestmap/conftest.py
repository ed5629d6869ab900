import contextlib
import os
import tempfile

# Point the app at a throwaway SQLite file before any settings are loaded.
TEST_DATABASE_PATH = os.path.join(tempfile.gettempdir(), f"protestmap_test_{os.getpid()}.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DATABASE_PATH}"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from protestmap.config.database import async_session_maker, engine  # noqa: E402
from protestmap.main import app  # noqa: E402
from protestmap.models.base import BaseModel  # noqa: E402
from protestmap.protests.repository import orm_models  # noqa: E402, F401


@pytest.fixture(scope="function")
async def test_db():
    """Recreate the schema for each test."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)
        await conn.run_sync(BaseModel.metadata.create_all)

    yield

    await engine.dispose()


@pytest.fixture(scope="function")
async def db_session(test_db):
    """A session on the test database, rolled back afterwards."""
    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture(scope="function")
def client_factory(test_db):
    """Build a test client with the given dependency overrides."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        for dependency, override in (overrides or {}).items():
            app.dependency_overrides[dependency] = override

        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture(scope="function")
async def client(client_factory):
    """A test client talking to the real SQL models."""
    async with client_factory() as ac:
        yield ac
