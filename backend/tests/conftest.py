import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from postboard.core.config import get_settings
from postboard.db.base import Base
from postboard.db.session import dispose_engine, get_engine, get_session, get_session_factory
from postboard.main import app

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


def _clear_caches():
    get_settings.cache_clear()
    get_session_factory.cache_clear()
    get_engine.cache_clear()


@pytest.fixture(autouse=True)
def settings_env(tmp_path, monkeypatch):
    """Point every test at its own SQLite file with seeding disabled."""
    monkeypatch.setenv("POSTBOARD_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'postboard.db'}")
    monkeypatch.setenv("POSTBOARD_SEED_DEMO_DATA", "false")
    monkeypatch.setenv("POSTBOARD_SECRET_KEY", TEST_SECRET)
    _clear_caches()
    yield get_settings()
    _clear_caches()


@pytest_asyncio.fixture
async def session(settings_env):
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        async with get_session() as db_session:
            yield db_session
    finally:
        await dispose_engine()


@pytest.fixture
def client(settings_env):
    with TestClient(app) as test_client:
        yield test_client
