"""Utility functions for endpoint handlers."""

from typing import Any, Optional, Sequence

from pydantic import SecretStr

from configuration import AppConfig
from errors import InternalError, KeyMissingError
from log import get_logger

logger = get_logger(__name__)


def check_configuration_loaded(config: AppConfig) -> None:
    """
    Ensure the application configuration object is present and loaded.

    Raises:
        InternalError: when `config` is None or nothing was loaded into it.
    """
    if config is None or not config.is_loaded():
        raise InternalError(error="Configuration is not loaded")


def resolve_api_key(
    request_api_key: Optional[str], configured_api_key: Optional[SecretStr]
) -> str:
    """Select API key used to call the completion API.

    Non-blank key supplied with the request wins over the configured one.

    Raises:
        KeyMissingError: when neither key is available.
    """
    if request_api_key is not None and request_api_key.strip():
        logger.debug("Using API key supplied with the request")
        return request_api_key.strip()
    if configured_api_key is not None:
        api_key = configured_api_key.get_secret_value().strip()
        if api_key:
            logger.debug("Using configured API key")
            return api_key
    logger.warning("No API key available for the completion API")
    raise KeyMissingError()


def parse_history_limit(raw_limit: Optional[str], default_limit: int) -> int:
    """Parse history limit from query parameter.

    Missing, non-numeric and non-positive values are replaced by the default.
    """
    if raw_limit is None:
        return default_limit
    try:
        limit = int(raw_limit)
    except ValueError:
        logger.debug("Invalid history limit %r, using default", raw_limit)
        return default_limit
    if limit <= 0:
        logger.debug("Non-positive history limit %d, using default", limit)
        return default_limit
    return limit


def validation_error_details(errors: Sequence[Any]) -> dict[str, list[str]]:
    """Group pydantic validation errors by the offending field.

    The location prefix added by FastAPI ("body", "query") is dropped so that
    field paths match the request payload, e.g. "parameters.max_tokens".
    """
    details: dict[str, list[str]] = {}
    for error in errors:
        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] in ("body", "query", "path", "header"):
            location = location[1:]
        field = ".".join(location) or "body"
        details.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return details
