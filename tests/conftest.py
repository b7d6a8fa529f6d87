"""Shared fixtures for URL Shortener tests."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from urlshortener.core.config import Settings
from urlshortener.core.database import Database
from urlshortener.core.store import UrlStore
from urlshortener.main import create_app


@pytest.fixture
def settings():
    """Settings isolated from the developer's environment."""
    return Settings(_env_file=None, database_url=":memory:", log_level="WARNING")


@pytest.fixture
def test_db():
    """Create a test database instance."""
    db = Database(":memory:")
    db.init_db()
    yield db
    db.close()


@pytest.fixture
def app(settings, test_db):
    """Create an application wired to the test database."""
    return create_app(settings=settings, store=test_db)


@pytest.fixture
def client(app):
    """Create a test client for the application."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def mock_store():
    """Create a mock record store."""
    store = MagicMock(spec=UrlStore)
    store.find_by_original_url.return_value = None
    store.find_by_short_id.return_value = None
    store.insert.side_effect = lambda record: record
    return store
