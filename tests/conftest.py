"""Shared test fixtures."""

import os
import tempfile
from pathlib import Path

# Point the app at a throwaway database before it is imported
_TEST_DIR = Path(tempfile.mkdtemp(prefix="portal-tests-"))
TEST_DATABASE_URL = f"sqlite+aiosqlite:///{_TEST_DIR / 'test.db'}"
os.environ["PORTAL_DATABASE_URL"] = TEST_DATABASE_URL
os.environ["PORTAL_DATA_DIR"] = str(_TEST_DIR)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402

from portal_server.database.base import Base  # noqa: E402
from portal_server.database.models import EpisodeLinkORM, EpisodeORM  # noqa: E402,F401
from portal_server.main import app  # noqa: E402


@pytest.fixture
def sync_engine():
    """Synchronous engine on the test database, for setup and assertions."""
    engine = create_engine(TEST_DATABASE_URL.replace("+aiosqlite", ""))
    yield engine
    engine.dispose()


@pytest.fixture
def client(sync_engine):
    """Create a test client against a freshly seeded database."""
    Base.metadata.drop_all(sync_engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def link_count(sync_engine):
    """Return a callable counting rows in episode_links."""

    def _count() -> int:
        with sync_engine.connect() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM episode_links")).scalar_one()

    return _count


@pytest.fixture
def submit_link(client):
    """Return a callable submitting a link through the API."""

    def _submit(episode_id, url="https://example.com/watch", quality="1080p", source="google drive"):
        return client.post(
            f"/api/episodes/{episode_id}/links",
            json={"url": url, "quality": quality, "source": source},
        )

    return _submit
