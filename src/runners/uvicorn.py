"""Uvicorn runner."""

import logging
import uvicorn

from log import get_logger
from models.config import ServiceConfiguration

logger = get_logger(__name__)

# every worker builds its own application, quota ledger included
APP_FACTORY = "app.main:create_app"


def start_uvicorn(configuration: ServiceConfiguration) -> None:
    """Start Uvicorn-based REST API service.

    Args:
        configuration: Service section of the configuration with host,
            port, number of workers, TLS and logging settings.
    """
    tls_config = configuration.tls_config
    logger.info(
        "Starting Uvicorn on %s:%d with %d worker(s), TLS %s",
        configuration.host,
        configuration.port,
        configuration.workers,
        "enabled" if tls_config.tls_certificate_path is not None else "disabled",
    )

    # TLS fields can be None, they are passed to Uvicorn as they are
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=configuration.host,
        port=configuration.port,
        workers=configuration.workers,
        log_level=logging.INFO,
        ssl_keyfile=tls_config.tls_key_path,
        ssl_certfile=tls_config.tls_certificate_path,
        ssl_keyfile_password=str(tls_config.tls_key_password or ""),
        use_colors=configuration.color_log,
        access_log=configuration.access_log,
    )
