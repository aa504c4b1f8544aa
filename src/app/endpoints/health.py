"""Handlers for health REST API endpoints.

The health endpoint reports status together with the current time. The
readiness and liveness probes tell whether the service finished its startup
and is able to accept requests. All of them answer GET requests only.
"""

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from app.state import ApplicationState
from configuration import configuration
from models.responses import HealthResponse, LivenessResponse, ReadinessResponse
from quota.clock import utc_now

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["health"])


def check_readiness(app_state: ApplicationState) -> tuple[bool, str]:
    """
    Check that configuration is loaded and application startup finished.

    Returns:
        tuple[bool, str]: (is_ready, detailed_reason)
    """
    if not configuration.is_loaded():
        return False, "Configuration not loaded"

    if not app_state.is_fully_initialized:
        initialization_status = app_state.initialization_status
        # return specific error if available
        errors = initialization_status["errors"]
        if errors:
            return False, f"Initialization failed: {errors[0]}"

        failed_checks = [
            check.replace("_", " ").title()
            for check, passed in initialization_status["checks"].items()
            if not passed
        ]
        if failed_checks:
            return False, f"Incomplete initialization: {', '.join(failed_checks)}"
        return False, "Application initialization not complete"

    return True, "Service ready"


@router.get("/health")
async def health_endpoint_handler() -> HealthResponse:
    """
    Return basic health status together with the current time.

    Returns:
        HealthResponse: Always reports status "ok".
    """
    logger.info("Response to /api/health endpoint")
    return HealthResponse(status="ok", timestamp=utc_now())


get_readiness_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Service is ready",
        "model": ReadinessResponse,
    },
    503: {
        "description": "Service is not ready",
        "model": ReadinessResponse,
    },
}


@router.get("/readiness", responses=get_readiness_responses)
async def readiness_probe_get_method(
    request: Request,
    response: Response,
) -> ReadinessResponse:
    """
    Readiness probe that validates complete application readiness.

    Returns 200 when the configuration is loaded and the application
    finished its startup sequence, 503 otherwise.
    """
    logger.info("Response to /api/readiness endpoint")

    ready, reason = check_readiness(request.app.state.initialization)
    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(ready=ready, reason=reason)


get_liveness_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Service is alive",
        "model": LivenessResponse,
    },
    # HTTP_503_SERVICE_UNAVAILABLE will never be returned when unreachable
}


@router.get("/liveness", responses=get_liveness_responses)
async def liveness_probe_get_method() -> LivenessResponse:
    """
    Return the liveness status of the service.

    Returns:
        LivenessResponse: Indicates that the service is alive.
    """
    logger.info("Response to /api/liveness endpoint")

    return LivenessResponse(alive=True)
