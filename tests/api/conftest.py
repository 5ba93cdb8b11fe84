"""Fixtures for API tests.

Routes run against a MagicMock TrainingLogDAO; nothing talks to Supabase.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from poolside.api.app import create_app
from poolside.api.dependencies import get_settings_dep, get_training_log_dao
from poolside.config import Settings
from poolside.dao import TrainingLogDAO


@pytest.fixture
def training_log_dao() -> MagicMock:
    """Mock DAO shared with the test client."""
    return MagicMock(spec=TrainingLogDAO)


@pytest.fixture
def app(training_log_dao: MagicMock):
    app = create_app()
    app.dependency_overrides[get_training_log_dao] = lambda: training_log_dao
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def client_with_settings(app):
    """Test client factory using the given settings overrides."""

    def _client(**overrides) -> TestClient:
        settings = Settings(**overrides)
        app.dependency_overrides[get_settings_dep] = lambda: settings
        return TestClient(app)

    return _client
