"""Handler for REST API call to provide info."""

import logging
from typing import Any

from fastapi import APIRouter, Request

from configuration import configuration
from models.responses import InfoResponse
from version import __version__

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["info"])


get_info_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "name": "Service name",
        "service_version": "Service version",
    },
}


@router.get("/info", responses=get_info_responses)
async def info_endpoint_handler(request: Request) -> InfoResponse:
    """
    Handle request to the /info endpoint.

    Process GET requests to the /info endpoint, returning the
    service name and version.

    Returns:
        InfoResponse: An object containing the service's name and version.
    """
    # Nothing interesting in the request
    _ = request

    logger.info("Response to /api/info endpoint")
    logger.debug("Service name: %s", configuration.configuration.name)
    logger.debug("Service version: %s", __version__)
    return InfoResponse(
        name=configuration.configuration.name,
        service_version=__version__,
    )
