"""Handler for REST API call to generate text by the completion API."""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, status

import constants
import metrics
from client import CompletionClientHolder, build_request_body
from configuration import configuration
from errors import InternalError, UpstreamError
from models.history import HistoryEntry
from models.requests import GenerationRequest
from models.responses import ErrorResponse, GenerateResponse, UpstreamErrorResponse
from utils.endpoints import check_configuration_loaded, resolve_api_key

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["generate"])


generate_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Generated text",
        "model": GenerateResponse,
    },
    400: {
        "description": "Invalid request, missing API key or completion API failure",
        "model": UpstreamErrorResponse,
    },
    500: {
        "description": "Unexpected error",
        "model": ErrorResponse,
    },
}


@router.post("/generate", responses=generate_responses)
async def generate_endpoint_handler(
    generation_request: GenerationRequest,
) -> GenerateResponse:
    """
    Handle request to the /generate endpoint.

    The request body has already been validated. Resolve the API key, call
    the completion API, record the generation in prompt history and return
    generated text along with raw completion API headers and body.

    Raises:
        KeyMissingError: no API key in the request nor in configuration.
        UpstreamError: completion API returned non-success status.
        InternalError: transport failure or history store fault.
    """
    check_configuration_loaded(configuration)
    upstream_configuration = configuration.upstream_configuration

    api_key = resolve_api_key(
        generation_request.supplied_api_key(), upstream_configuration.api_key
    )

    prompt = generation_request.prompt
    parameters = generation_request.parameters
    logger.info("Generating text with model %s", parameters.model)

    try:
        client = CompletionClientHolder().get_client()
        result = await client.complete(prompt, parameters, api_key)
    except UpstreamError as e:
        metrics.llm_calls_failures_total.inc()
        logger.error(
            "Completion API failed with status %d: %s", e.upstream_status, e.error
        )
        if upstream_configuration.propagate_error_status and e.upstream_status >= 400:
            e.status_code = e.upstream_status
        else:
            e.status_code = status.HTTP_400_BAD_REQUEST
        raise
    except Exception as e:
        metrics.llm_calls_failures_total.inc()
        logger.exception("Unable to call completion API")
        raise InternalError(e) from e

    metrics.llm_calls_total.labels(parameters.model).inc()
    metrics.llm_token_used_total.labels(parameters.model).inc(result.tokens_used)

    # history is written only after the completion API call has finished
    try:
        record = configuration.history_cache.save(
            HistoryEntry(
                prompt=prompt,
                model=parameters.model,
                timestamp=datetime.now(UTC),
                tokens_used=result.tokens_used,
                parameters=build_request_body(prompt, parameters),
                response=result.text,
            )
        )
    except Exception as e:
        logger.exception("Unable to save prompt history")
        raise InternalError(
            e,
            error=constants.HISTORY_NOT_SAVED,
            details={
                "historySaved": False,
                "text": result.text,
                "usage": result.usage,
            },
        ) from e
    logger.info(
        "Generation stored as history record %d, %d tokens used",
        record.id,
        result.tokens_used,
    )

    return GenerateResponse(
        text=result.text,
        headers=result.headers,
        body=result.body,
        usage=result.usage,
    )
