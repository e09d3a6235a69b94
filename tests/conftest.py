"""
Pytest fixtures for workout-api tests.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from backend.settings import Settings


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient.
    Properly cleans up dependency overrides after each test.
    """
    yield TestClient(app)
    app.dependency_overrides.clear()
