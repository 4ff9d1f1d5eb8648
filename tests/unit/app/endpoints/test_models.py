"""Unit tests for the /models REST API endpoint."""

import pytest
from pytest_mock import MockerFixture

import constants
from app.endpoints.models import models_endpoint_handler
from configuration import AppConfig
from errors import InternalError


@pytest.mark.asyncio
async def test_models_endpoint(app_config: AppConfig) -> None:
    """Test the models endpoint handler with default model catalogue."""
    _ = app_config
    response = await models_endpoint_handler()

    assert response.models == list(constants.AVAILABLE_MODELS)
    assert response.default_model == constants.DEFAULT_MODEL
    assert response.default_parameters.model == constants.DEFAULT_MODEL
    assert response.default_parameters.max_tokens == 256


@pytest.mark.asyncio
async def test_models_endpoint_custom_catalogue(app_config: AppConfig) -> None:
    """Test the models endpoint handler with configured model list."""
    app_config.init_from_dict(
        {
            "inference": {
                "models": ["foo/bar", "foo/baz"],
                "default_parameters": {
                    "model": "foo/baz",
                    "max_tokens": 10,
                    "temperature": 0.0,
                    "top_p": 1.0,
                    "top_k": 1,
                    "repetition_penalty": 1.0,
                },
            }
        }
    )
    response = await models_endpoint_handler()

    assert response.models == ["foo/bar", "foo/baz"]
    assert response.default_model == "foo/baz"
    assert response.default_parameters.max_tokens == 10


@pytest.mark.asyncio
async def test_models_endpoint_configuration_not_loaded(
    mocker: MockerFixture,
) -> None:
    """Test the models endpoint handler when configuration is not loaded."""
    mock_config = mocker.Mock()
    mock_config.is_loaded.return_value = False
    mocker.patch("app.endpoints.models.configuration", mock_config)

    with pytest.raises(InternalError, match="Configuration is not loaded"):
        await models_endpoint_handler()
