"""Conversion of errors into JSON error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

import constants
import metrics
from configuration import configuration
from errors import InvalidRequestError, PlaygroundError
from utils.endpoints import validation_error_details

logger = logging.getLogger("app.endpoints.handlers")


def is_production() -> bool:
    """Check if internal error details have to be hidden from clients."""
    if not configuration.is_loaded():
        return False
    return configuration.service_configuration.is_production


async def playground_error_handler(
    request: Request, exc: PlaygroundError
) -> JSONResponse:
    """Render PlaygroundError with its own status code."""
    logger.debug(
        "%s %s failed with %d: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.error,
    )
    return JSONResponse(
        status_code=exc.status_code, content=exc.render(is_production())
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failure as 400 with field-level details."""
    if request.url.path.endswith("/generate"):
        metrics.llm_calls_validation_errors_total.inc()
    error = InvalidRequestError(validation_error_details(exc.errors()))
    logger.info(
        "Invalid request to %s: %s", request.url.path, ", ".join(error.details or {})
    )
    return await playground_error_handler(request, error)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort handler answering 500 for anything not handled elsewhere.

    Starlette sends the response only when no response has been started yet.
    """
    logger.error(
        "Unhandled error in %s %s: %s", request.method, request.url.path, exc
    )
    content: dict[str, object] = {"error": constants.INTERNAL_ERROR}
    if not is_production():
        content["details"] = {"message": str(exc)}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register error handlers producing `{"error": ..., "details": ...}` bodies.

    Args:
        app: The `FastAPI` app instance.
    """
    app.add_exception_handler(PlaygroundError, playground_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
