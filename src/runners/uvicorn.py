"""Uvicorn runner."""

import logging
import uvicorn

from log import get_logger
from models.config import ServiceConfiguration

logger = get_logger(__name__)


def start_uvicorn(configuration: ServiceConfiguration) -> None:
    """Start Uvicorn-based REST API service."""
    logger.info(
        "Starting Uvicorn on %s:%d in %s mode",
        configuration.host,
        configuration.port,
        configuration.environment,
    )

    log_level = logging.INFO

    uvicorn.run(
        "app.main:app",
        host=configuration.host,
        port=configuration.port,
        workers=configuration.workers,
        log_level=log_level,
        use_colors=configuration.color_log,
        access_log=configuration.access_log,
    )
