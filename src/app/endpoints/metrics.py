"""Handler for the Prometheus scrape endpoint."""

from typing import Any

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["metrics"])


metrics_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Counters and histograms in Prometheus text format",
        "content": {CONTENT_TYPE_LATEST: {}},
    },
}


@router.get("/metrics", response_class=Response, responses=metrics_responses)
async def metrics_endpoint_handler(request: Request) -> Response:
    """
    Handle request to the /metrics endpoint.

    The endpoint is not authenticated and it is not counted by the REST API
    metrics middleware, because Prometheus calls it periodically.
    """
    # Nothing interesting in the request
    _ = request

    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
