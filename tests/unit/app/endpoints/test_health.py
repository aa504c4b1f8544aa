"""Unit tests for the /health, /readiness and /liveness REST API endpoints."""

from datetime import timezone

import pytest
from pytest_mock import MockerFixture

from app.endpoints.health import (
    check_readiness,
    health_endpoint_handler,
    liveness_probe_get_method,
    readiness_probe_get_method,
    router,
)
from app.state import ApplicationState
from configuration import configuration


def initialized_state() -> ApplicationState:
    """Create application state that finished its startup."""
    app_state = ApplicationState()
    app_state.mark_check_complete("configuration_loaded", True)
    app_state.mark_check_complete("quota_ledger_initialized", True)
    app_state.mark_initialization_complete()
    return app_state


@pytest.mark.asyncio
async def test_health_endpoint() -> None:
    """Test the health endpoint handler."""
    response = await health_endpoint_handler()
    assert response.status == "ok"
    assert response.timestamp.tzinfo is not None
    assert response.timestamp.utcoffset() == timezone.utc.utcoffset(None)


@pytest.mark.asyncio
async def test_liveness_probe() -> None:
    """Test the liveness endpoint handler."""
    response = await liveness_probe_get_method()
    assert response is not None
    assert response.alive is True


class TestCheckReadiness:
    """Test cases for the check_readiness function."""

    def test_ready(self, minimal_config) -> None:
        """Test that initialized application is ready."""
        assert check_readiness(initialized_state()) == (True, "Service ready")

    def test_configuration_not_loaded(self, monkeypatch) -> None:
        """Test that application without configuration is not ready."""
        monkeypatch.setattr(configuration, "_configuration", None)
        assert check_readiness(initialized_state()) == (
            False,
            "Configuration not loaded",
        )

    def test_initialization_error(self, minimal_config) -> None:
        """Test that the first initialization error is reported."""
        app_state = ApplicationState()
        app_state.mark_check_complete("configuration_loaded", False, "broken YAML")

        ready, reason = check_readiness(app_state)
        assert ready is False
        assert reason == "Initialization failed: configuration_loaded: broken YAML"

    def test_incomplete_initialization(self, minimal_config) -> None:
        """Test that pending startup checks are reported."""
        app_state = ApplicationState()
        app_state.mark_check_complete("configuration_loaded", True)

        ready, reason = check_readiness(app_state)
        assert ready is False
        assert reason == "Incomplete initialization: Quota Ledger Initialized"

    def test_initialization_not_complete(self, minimal_config) -> None:
        """Test that passed checks are not enough without completed startup."""
        app_state = ApplicationState()
        app_state.mark_check_complete("configuration_loaded", True)
        app_state.mark_check_complete("quota_ledger_initialized", True)

        assert check_readiness(app_state) == (
            False,
            "Application initialization not complete",
        )


@pytest.mark.asyncio
async def test_readiness_probe_success(mocker: MockerFixture, minimal_config) -> None:
    """Test the readiness endpoint handler for initialized application."""
    request = mocker.Mock()
    request.app.state.initialization = initialized_state()
    mock_response = mocker.Mock()
    mock_response.status_code = 200

    response = await readiness_probe_get_method(request=request, response=mock_response)

    assert response.ready is True
    assert response.reason == "Service ready"
    assert mock_response.status_code == 200


@pytest.mark.asyncio
async def test_readiness_probe_not_ready(mocker: MockerFixture, minimal_config) -> None:
    """Test the readiness endpoint handler for application still starting."""
    request = mocker.Mock()
    request.app.state.initialization = ApplicationState()
    mock_response = mocker.Mock()

    response = await readiness_probe_get_method(request=request, response=mock_response)

    assert response.ready is False
    assert "Incomplete initialization" in response.reason
    assert mock_response.status_code == 503


def test_health_routes_accept_get_only() -> None:
    """Test that health endpoints are registered for GET method only."""
    methods = {route.path: route.methods for route in router.routes}  # type: ignore
    assert methods == {
        "/health": {"GET"},
        "/readiness": {"GET"},
        "/liveness": {"GET"},
    }
