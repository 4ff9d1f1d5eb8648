"""Handlers for health REST API endpoints.

These endpoints are used to check if service is live and prepared to accept
requests. Note that these endpoints can be accessed using GET or HEAD HTTP
methods. For HEAD HTTP method, just the HTTP response code is used.
"""

import logging
from typing import Any

from fastapi import APIRouter, Response, status

from configuration import configuration
from models.responses import LivenessResponse, ReadinessResponse

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["health"])


get_readiness_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "ready": True,
        "reason": "Service is ready",
    },
    503: {
        "ready": False,
        "reason": "History store is not ready",
    },
}

get_liveness_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Service is alive",
        "model": LivenessResponse,
    },
    # HTTP_503_SERVICE_UNAVAILABLE will never be returned when unreachable
}


def check_readiness() -> tuple[bool, str]:
    """Check configuration, history store and default API key."""
    if not configuration.is_loaded():
        return False, "Configuration is not loaded"
    if not configuration.history_cache.ready():
        return False, "History store is not ready"
    if not configuration.upstream_configuration.has_api_key:
        # requests must supply their own key
        return True, "Service is ready, no default API key configured"
    return True, "Service is ready"


@router.get("/readiness", responses=get_readiness_responses)
async def readiness_probe_get_method(response: Response) -> ReadinessResponse:
    """
    Handle the readiness probe endpoint, returning service readiness.

    If the service is not ready, sets the HTTP status to 503 and returns
    the reason.
    """
    logger.info("Response to /readiness endpoint")

    ready, reason = check_readiness()
    if not ready:
        logger.warning("Service is not ready: %s", reason)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(ready=ready, reason=reason)


@router.get("/liveness", responses=get_liveness_responses)
async def liveness_probe_get_method() -> LivenessResponse:
    """
    Return the liveness status of the service.

    Returns:
        LivenessResponse: Indicates that the service is alive.
    """
    logger.info("Response to /liveness endpoint")

    return LivenessResponse(alive=True)
