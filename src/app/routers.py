"""REST API routers."""

from fastapi import FastAPI

from app.endpoints import (
    health,
    info,
    justify,
    metrics,
    root,
    token,
    usage,
)


def include_routers(app: FastAPI) -> None:
    """Include FastAPI routers for different endpoints.

    Args:
        app: The `FastAPI` app instance.
    """
    app.include_router(root.router)

    app.include_router(token.router, prefix="/api")
    app.include_router(justify.router, prefix="/api")
    app.include_router(usage.router, prefix="/api")
    app.include_router(info.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    # Prometheus scrapes unprefixed endpoint
    app.include_router(metrics.router)
