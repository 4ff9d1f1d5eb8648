"""Unit tests for endpoints utility functions."""

import pytest
from pydantic import SecretStr

from configuration import AppConfig
from errors import InternalError, KeyMissingError
from utils import endpoints


def test_check_configuration_loaded_with_none() -> None:
    """Test that missing configuration is reported."""
    with pytest.raises(InternalError) as exc_info:
        endpoints.check_configuration_loaded(None)  # pyright: ignore
    assert exc_info.value.status_code == 500
    assert exc_info.value.error == "Configuration is not loaded"


def test_check_configuration_loaded_not_loaded() -> None:
    """Test that configuration without any content is reported."""
    cfg = AppConfig()
    cfg._configuration = None  # pylint: disable=protected-access
    with pytest.raises(InternalError):
        endpoints.check_configuration_loaded(cfg)


def test_check_configuration_loaded(app_config: AppConfig) -> None:
    """Test that loaded configuration passes the check."""
    endpoints.check_configuration_loaded(app_config)


def test_resolve_api_key_from_request() -> None:
    """Test that API key supplied with request wins."""
    api_key = endpoints.resolve_api_key("request-key", SecretStr("configured-key"))
    assert api_key == "request-key"


def test_resolve_api_key_from_request_trimmed() -> None:
    """Test that whitespace around supplied API key is removed."""
    assert endpoints.resolve_api_key("  request-key ", None) == "request-key"


@pytest.mark.parametrize("request_api_key", [None, "", "   "])
def test_resolve_api_key_configured(request_api_key) -> None:
    """Test that configured API key is used when request has none."""
    api_key = endpoints.resolve_api_key(request_api_key, SecretStr("configured-key"))
    assert api_key == "configured-key"


@pytest.mark.parametrize("configured_api_key", [None, SecretStr(""), SecretStr("  ")])
@pytest.mark.parametrize("request_api_key", [None, "", "   "])
def test_resolve_api_key_missing(request_api_key, configured_api_key) -> None:
    """Test that missing API key is reported."""
    with pytest.raises(KeyMissingError) as exc_info:
        endpoints.resolve_api_key(request_api_key, configured_api_key)
    assert exc_info.value.status_code == 400
    assert exc_info.value.content() == {
        "error": "API key not found. Please set TOGETHER_API_KEY in the environment "
        "or provide one in the request."
    }


@pytest.mark.parametrize(
    "raw_limit,expected",
    [
        (None, 50),
        ("10", 10),
        ("1", 1),
        ("1000", 1000),
        ("0", 50),
        ("-5", 50),
        ("abc", 50),
        ("", 50),
        ("2.5", 50),
    ],
)
def test_parse_history_limit(raw_limit, expected) -> None:
    """Test parsing of history limit query parameter."""
    assert endpoints.parse_history_limit(raw_limit, 50) == expected


def test_parse_history_limit_configured_default() -> None:
    """Test that configured default limit is used."""
    assert endpoints.parse_history_limit("abc", 20) == 20


def test_validation_error_details() -> None:
    """Test grouping of validation errors by field."""
    errors = [
        {
            "loc": ("body", "parameters", "max_tokens"),
            "msg": "Input should be less than or equal to 4096",
        },
        {"loc": ("body", "prompt"), "msg": "Field required"},
        {"loc": ("body", "prompt"), "msg": "String should have at least 1 character"},
        {"loc": ("body",), "msg": "Field required"},
        {"loc": ("query", "limit"), "msg": "Input should be a valid integer"},
    ]
    assert endpoints.validation_error_details(errors) == {
        "parameters.max_tokens": ["Input should be less than or equal to 4096"],
        "prompt": ["Field required", "String should have at least 1 character"],
        "body": ["Field required"],
        "limit": ["Input should be a valid integer"],
    }


def test_validation_error_details_list_index() -> None:
    """Test that list indexes are part of the field path."""
    errors = [{"loc": ("body", "items", 0, "name"), "msg": "Field required"}]
    assert endpoints.validation_error_details(errors) == {
        "items.0.name": ["Field required"]
    }
