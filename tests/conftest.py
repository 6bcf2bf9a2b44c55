"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite connection provider with the bundled schema,
real DAOs, sample entities, and a FastAPI test client wired to the test
database.
Dependencies: pytest, sqlalchemy, fastapi
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from mindfulness.api.deps.dependencies import get_provider, get_session_cache, get_user_cache
from mindfulness.api.main import create_app
from mindfulness.boundary.db.connection import ConnectionProvider
from mindfulness.boundary.db.DAO import MindfulnessSessionDAO, UserDAO
from mindfulness.boundary.db.schema import initialize_schema
from mindfulness.core.cache import LRUCache
from mindfulness.models import MindfulnessSession, User


@pytest.fixture
def provider():
    """
    Create in-memory SQLite provider with the schema applied.

    StaticPool keeps one DBAPI connection, so the database survives the
    provider closing and reopening its connection.

    Yields:
        ConnectionProvider: Provider bound to a fresh database
    """
    test_provider = ConnectionProvider(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_schema(test_provider)
    yield test_provider
    test_provider.dispose()


@pytest.fixture
def user_dao(provider: ConnectionProvider) -> UserDAO:
    return UserDAO(provider)


@pytest.fixture
def session_dao(provider: ConnectionProvider) -> MindfulnessSessionDAO:
    return MindfulnessSessionDAO(provider)


@pytest.fixture
def sample_user() -> User:
    """Provide a valid, unsaved user."""
    return User(
        full_name="Asha K",
        email="asha@example.com",
        password="secret1",
        focus_area="stress",
    )


@pytest.fixture
def sample_session() -> MindfulnessSession:
    """Provide a valid, unsaved session scheduled one hour from now."""
    return MindfulnessSession(
        user_id=7,
        title="Morning Calm",
        description="Breath counting",
        difficulty="BEGINNER",
        category="Breathing",
        scheduled_at=(datetime.now() + timedelta(hours=1)).replace(microsecond=0),
        duration_minutes=15,
        reflection_notes=None,
    )


@pytest.fixture
def app():
    """Create a fresh application instance."""
    return create_app()


@pytest.fixture
def db_client(app, provider: ConnectionProvider):
    """
    Test client backed by the in-memory database.

    Caches are replaced per test so ids reused across databases never hit
    stale entries.
    """
    user_cache: LRUCache = LRUCache()
    session_cache: LRUCache = LRUCache()
    app.dependency_overrides[get_provider] = lambda: provider
    app.dependency_overrides[get_user_cache] = lambda: user_cache
    app.dependency_overrides[get_session_cache] = lambda: session_cache
    yield TestClient(app)
    app.dependency_overrides.clear()
