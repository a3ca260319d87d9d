"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from roster.config import get_settings
from roster.db.models import Player
from roster.db.session import create_tables, drop_tables


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False, future=True)
    create_tables(engine)
    yield engine
    drop_tables(engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Create a session factory bound to the test engine."""
    return sessionmaker(test_engine, class_=Session, expire_on_commit=False)


@pytest.fixture
def test_session(test_session_factory):
    """Provide a test database session that auto-commits."""
    session = test_session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.delenv("DB_DSN", raising=False)
    monkeypatch.delenv("MERGE_POLICY", raising=False)
    monkeypatch.setenv("ROSTER_MERGE_POLICY", "presence")
    monkeypatch.setenv("HOST", "localhost")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    """Point the application at a throwaway SQLite file."""
    url = f"sqlite:///{tmp_path / 'roster-test.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()
    return url


@pytest.fixture
def client(database_url):
    """Provide a TestClient running the full application lifespan."""
    from roster.server.app import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def jett():
    """Provide a fully populated player body."""
    return {
        "riotid": "Jett-001",
        "irlname": "Sun-woo",
        "team": "Bravo",
        "rank": "Radiant",
        "role": "Duelist",
        "main": "Jett",
        "acs": 265.4,
        "kdr": 1.32,
        "dpr": 168.0,
        "hs": 27.5,
    }


@pytest.fixture
def make_player():
    """Provide a factory for unsaved Players with defaults for omitted fields."""

    def _make(riot_id: str, **fields) -> Player:
        values = {
            "irl_name": "",
            "team": "",
            "rank": "",
            "role": "",
            "main": "",
            "acs": 0.0,
            "kdr": 0.0,
            "damage_per_round": 0.0,
            "hs": 0.0,
        }
        values.update(fields)
        return Player(riot_id=riot_id, **values)

    return _make
