"""Pytest configuration for tests."""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env.test file if it exists
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path)

# Set test environment variables before any imports (only if not already set)
os.environ.setdefault("BASE_URL", "https://api.hrmless.test")
os.environ.setdefault("BASE_LOGIN_URL", "https://login.hrmless.test")
os.environ.setdefault("LOG_LEVEL", "INFO")


@pytest.fixture
def mock_client():
    """Create a mocked HRMLESS client."""
    from tests.fixtures.mock_clients import MockHrmlessClient

    client = MockHrmlessClient()

    yield client

    client.reset()


@pytest.fixture
def mock_hrmless_client(monkeypatch, mock_client):
    """Inject the mocked client in place of the module-level singleton."""
    monkeypatch.setattr("hrmless.clients.hrmless.hrmless_client", mock_client)

    yield mock_client


@pytest.fixture
def base_url():
    """Configured API base URL."""
    from hrmless.core.config import settings

    return settings.base_url


@pytest.fixture
def bundle():
    """Bundle factory with a connected session."""
    from tests.fixtures.factories import create_bundle

    return create_bundle
