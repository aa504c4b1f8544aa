"""Shared fixtures for integration tests."""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from configuration import AppConfig, configuration


@pytest.fixture(autouse=True)
def reset_configuration_state() -> Generator:
    """Reset configuration state before each integration test.

    This autouse fixture ensures test independence by resetting the
    singleton configuration state before each test runs. This allows
    tests to verify both loaded and unloaded configuration states
    regardless of execution order.
    """
    # pylint: disable=protected-access
    configuration._configuration = None
    yield
    configuration._configuration = None


@pytest.fixture(name="configuration_filename")
def configuration_filename_fixture() -> str:
    """Retrieve configuration file name to be used by integration tests."""
    config_path = (
        Path(__file__).parent.parent / "configuration" / "justify-service.yaml"
    )
    assert config_path.exists(), f"Config file not found: {config_path}"
    return str(config_path)


@pytest.fixture(name="test_config")
def test_config_fixture(
    configuration_filename: str,
) -> Generator[AppConfig, None, None]:
    """Load real configuration for integration tests."""
    configuration.load_configuration(configuration_filename)
    yield configuration
    # Note: Cleanup is handled by the autouse reset_configuration_state fixture


@pytest.fixture(name="client")
def client_fixture(test_config: AppConfig, fake_clock) -> TestClient:
    """Create test client for application driven by the fake clock."""
    _ = test_config
    return TestClient(create_app(clock=fake_clock))


@pytest.fixture(name="access_token")
def access_token_fixture(client: TestClient) -> str:
    """Issue access token through the REST API."""
    response = client.post("/api/token", json={"email": "foo@example.com"})
    assert response.status_code == 200
    return response.json()["token"]
