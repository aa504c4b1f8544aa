"""Definition of FastAPI based web service."""

import os
import time
from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

import constants
import metrics
import version
from app import routers
from app.state import ApplicationState
from configuration import configuration
from log import get_logger
from quota.clock import Clock, utc_now
from quota.quota_ledger import QuotaLedger

logger = get_logger(__name__)


def load_configuration(app_state: ApplicationState) -> None:
    """Load configuration unless it was already loaded by the caller.

    Uvicorn workers do not share process context with the CLI, so the
    configuration path is passed to them in an environment variable.
    """
    if not configuration.is_loaded():
        config_path = os.environ.get(
            constants.CONFIGURATION_PATH_ENV_VARIABLE,
            constants.DEFAULT_CONFIGURATION_PATH,
        )
        try:
            configuration.load_configuration(config_path)
        except Exception as e:
            app_state.mark_check_complete("configuration_loaded", False, str(e))
            logger.exception("Unable to load configuration from %s", config_path)
            raise
    app_state.mark_check_complete("configuration_loaded", True)


def matched_route_path(request: Request) -> Optional[str]:
    """Return path template of the route that handled the request.

    Must be called after the request was dispatched. Returns None when no
    route matched.
    """
    route = request.scope.get("route")
    return getattr(route, "path", None)


def create_quota_ledger(app_state: ApplicationState, clock: Clock) -> QuotaLedger:
    """Create quota ledger based on loaded configuration."""
    quota_configuration = configuration.quota_configuration
    quota_ledger = QuotaLedger(
        daily_word_limit=quota_configuration.daily_word_limit,
        clock=clock,
        lock_shards=quota_configuration.lock_shards,
    )
    logger.info("Set up %s", quota_ledger)
    app_state.mark_check_complete("quota_ledger_initialized", True)
    return quota_ledger


def create_app(clock: Clock = utc_now) -> FastAPI:
    """Create the web service.

    Args:
        clock: Time source of the quota ledger, current UTC time by default.

    Returns:
        Configured FastAPI application owning its own quota ledger.
    """
    logger.info("Initializing app")
    app_state = ApplicationState()
    load_configuration(app_state)

    service_name = configuration.configuration.name

    app = FastAPI(
        title=f"{service_name} - OpenAPI",
        summary=f"{service_name} API specification.",
        description=f"{service_name} REST API specification.",
        version=version.__version__,
        license_info={
            "name": "Apache 2.0",
            "url": "https://www.apache.org/licenses/LICENSE-2.0.html",
        },
        servers=[
            {"url": "http://localhost:3000/", "description": "Locally running service"}
        ],
    )

    app.state.initialization = app_state
    app.state.quota_ledger = create_quota_ledger(app_state, clock)

    cors = configuration.service_configuration.cors

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.allow_origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )

    logger.info("Including routers")
    routers.include_routers(app)

    @app.middleware("http")
    async def rest_api_metrics(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Middleware with REST API counter update logic."""
        logger.debug("Received request for path: %s", request.url.path)

        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        # the router stores the matched route in the scope, unknown paths have none
        path = matched_route_path(request)
        if path is None:
            return response

        metrics.response_duration_seconds.labels(path).observe(duration)

        # ignore /metrics endpoint that will be called periodically
        if not path.endswith("/metrics"):
            metrics.rest_api_calls_total.labels(path, response.status_code).inc()
        return response

    app_state.mark_initialization_complete()
    logger.info("App startup complete")
    return app
