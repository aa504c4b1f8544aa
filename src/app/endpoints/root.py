"""Handler for the / endpoint."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["root"])

index_page = """
<html>
    <head>
        <title>Justify service</title>
    </head>
    <body style='font-family: monospace;text-align:center;'>
        <h1>Justify service</h1>
        <div>POST /api/token &rarr; get an access token for your e-mail</div>
        <div>POST /api/justify &rarr; justify text/plain body (bearer token)</div>
        <div>GET /api/usage &rarr; words used today (bearer token)</div>
        <div><a href="docs">Swagger UI</a></div>
        <div><a href="redoc">ReDoc</a></div>
    </body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
async def root_endpoint_handler(request: Request) -> HTMLResponse:
    """
    Handle request to the / endpoint.

    Returns:
        HTMLResponse: Static landing page describing the API.
    """
    # Nothing interesting in the request
    _ = request

    logger.info("Response to / endpoint")
    return HTMLResponse(index_page)
