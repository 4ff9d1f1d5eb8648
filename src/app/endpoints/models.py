"""Handler for REST API call to list models offered by the playground."""

import logging
from typing import Any

from fastapi import APIRouter

import constants
from configuration import configuration
from models.responses import ModelsResponse
from utils.endpoints import check_configuration_loaded

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["models"])


models_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "models": list(constants.AVAILABLE_MODELS),
        "default_model": constants.DEFAULT_MODEL,
        "default_parameters": {
            "model": constants.DEFAULT_MODEL,
            "max_tokens": 256,
            "temperature": 0.7,
            "top_p": 0.8,
            "top_k": 40,
            "repetition_penalty": 1.0,
            "frequency_penalty": 0.0,
            "stop": None,
        },
    },
}


@router.get("/models", responses=models_responses)
async def models_endpoint_handler() -> ModelsResponse:
    """Handle requests to the /models endpoint.

    The model list and default generation parameters come from the
    configuration, the completion API is not contacted.
    """
    check_configuration_loaded(configuration)
    inference = configuration.inference
    logger.info("Listing %d models", len(inference.models))
    return ModelsResponse(
        models=inference.models,
        default_model=inference.default_model,
        default_parameters=inference.default_parameters,
    )
