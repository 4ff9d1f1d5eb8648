"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import copy
from typing import Any, Callable

import httpx
import pytest

from configuration import AppConfig, configuration
from models.requests import GenerationParameters
from tests.unit import config_dict


@pytest.fixture(name="app_config")
def app_config_fixture() -> AppConfig:
    """Initialize configuration (and a fresh prompt history) for a test."""
    configuration.init_from_dict(copy.deepcopy(config_dict))
    return configuration


@pytest.fixture(name="parameters")
def parameters_fixture() -> GenerationParameters:
    """Valid generation parameters."""
    return GenerationParameters(
        model="test-model",
        max_tokens=100,
        temperature=0.7,
        top_p=0.8,
        top_k=40,
        repetition_penalty=1.0,
    )


@pytest.fixture(name="completion_body")
def completion_body_fixture() -> dict[str, Any]:
    """Successful completion API response body."""
    return {
        "id": "cmpl-123",
        "object": "text_completion",
        "created": 1700000000,
        "model": "test-model",
        "choices": [{"text": "Test response", "index": 0, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 4, "completion_tokens": 6, "total_tokens": 10},
    }


@pytest.fixture(name="make_transport")
def make_transport_fixture() -> Callable[..., httpx.MockTransport]:
    """Return factory of mocked completion API transports.

    Every request seen by the transport is appended to the `requests`
    attribute of the returned transport.
    """

    def make_transport(
        status_code: int = 200, json: Any = None, text: str | None = None
    ) -> httpx.MockTransport:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(
                status_code, json=json, headers={"x-request-id": "req-1"}
            )

        transport = httpx.MockTransport(handler)
        transport.requests = seen  # type: ignore[attr-defined]
        return transport

    return make_transport
