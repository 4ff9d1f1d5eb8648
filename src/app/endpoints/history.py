"""Handler for REST API calls to read and clear prompt history."""

import logging
from typing import Any, Optional

from fastapi import APIRouter

import constants
from configuration import configuration
from errors import InternalError
from models.responses import ErrorResponse, HistoryClearedResponse, HistoryResponse
from utils.endpoints import check_configuration_loaded, parse_history_limit

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["history"])


history_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "history": [
            {
                "id": 1,
                "prompt": "Write a haiku about llamas",
                "model": "meta-llama/Llama-3.3-70B-Instruct-Turbo",
                "timestamp": "2024-01-01T00:00:00Z",
                "tokensUsed": 42,
                "parameters": {"model": "meta-llama/Llama-3.3-70B-Instruct-Turbo"},
                "response": "Soft wool on the hills",
            }
        ]
    },
    500: {
        "description": "Unexpected error",
        "model": ErrorResponse,
    },
}

history_delete_responses: dict[int | str, dict[str, Any]] = {
    200: {"message": constants.HISTORY_CLEARED},
    500: {
        "description": "Unexpected error",
        "model": ErrorResponse,
    },
}


@router.get("/history", responses=history_responses)
async def get_history_endpoint_handler(
    limit: Optional[str] = None,
) -> HistoryResponse:
    """Handle request to retrieve prompt history, the most recent record first.

    The limit is taken as a raw string so that malformed values fall back to
    the default instead of failing the request.
    """
    check_configuration_loaded(configuration)
    default_limit = configuration.history_configuration.default_limit
    effective_limit = parse_history_limit(limit, default_limit)
    logger.info("Retrieving up to %d history records", effective_limit)

    try:
        records = configuration.history_cache.list(effective_limit)
    except Exception as e:
        logger.exception("Error retrieving history")
        raise InternalError(e) from e

    return HistoryResponse(history=records)


@router.delete("/history", responses=history_delete_responses)
async def delete_history_endpoint_handler() -> HistoryClearedResponse:
    """Handle request to clear prompt history."""
    check_configuration_loaded(configuration)
    logger.info("Clearing prompt history")

    try:
        configuration.history_cache.clear()
    except Exception as e:
        logger.exception("Error clearing history")
        raise InternalError(e) from e

    return HistoryClearedResponse(message=constants.HISTORY_CLEARED)
