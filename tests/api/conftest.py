import pytest
from fastapi.testclient import TestClient

from forecaster.api import deps
from forecaster.api.app import app
from forecaster.config import settings


@pytest.fixture
def client(tmp_path, monkeypatch):
    """App client backed by a throwaway SQLite file."""
    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'scenarios.db'}")
    deps.get_engine.cache_clear()
    deps.get_sessionmaker.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    deps.get_engine.cache_clear()
    deps.get_sessionmaker.cache_clear()


@pytest.fixture
def auth() -> tuple[str, str]:
    return settings.scenario_username, settings.scenario_password
