"""Shared fixtures for integration tests."""

from pathlib import Path
from typing import Any, Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from client import CompletionClientHolder
from configuration import configuration

CONFIGURATION_DIR = Path(__file__).parent.parent / "configuration"


class FakeCompletionAPI:
    """Completion API replacement answering with configurable response.

    Every request seen is appended to `requests`.
    """

    def __init__(self) -> None:
        """Initialize the fake API answering with single choice."""
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {
            "id": "cmpl-123",
            "object": "text_completion",
            "choices": [{"text": "Test response", "index": 0, "finish_reason": "stop"}],
            "usage": {"prompt_tokens": 4, "completion_tokens": 6, "total_tokens": 10},
        }

    def respond_with(self, status_code: int, body: Any) -> None:
        """Change the response returned for subsequent requests."""
        self.status_code = status_code
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        """Record the request and return the configured response."""
        self.requests.append(request)
        return httpx.Response(
            self.status_code, json=self.body, headers={"x-request-id": "req-1"}
        )


@pytest.fixture(autouse=True)
def reset_configuration_state() -> Generator:
    """Reset configuration state before each integration test.

    This autouse fixture ensures test independence by resetting the
    singleton configuration state before each test runs.
    """
    # pylint: disable=protected-access
    configuration._configuration = None
    configuration._history_cache = None
    yield


@pytest.fixture(name="test_config", scope="function")
def test_config_fixture() -> Generator:
    """Load configuration file used in testing, environment is ignored."""
    config_path = CONFIGURATION_DIR / "llm-playground.yaml"
    assert config_path.exists(), f"Config file not found: {config_path}"

    configuration.load_configuration(str(config_path), environ={})

    yield configuration


@pytest.fixture(name="completion_api")
def completion_api_fixture() -> FakeCompletionAPI:
    """Fake completion API."""
    return FakeCompletionAPI()


@pytest.fixture(name="client")
def client_fixture(
    test_config: Any, completion_api: FakeCompletionAPI
) -> Generator[TestClient, None, None]:
    """Run the whole app with the fake completion API."""
    from app.main import app  # pylint: disable=import-outside-toplevel

    with TestClient(app) as test_client:
        # replace client created on startup by one talking to the fake API
        CompletionClientHolder().load(
            test_config.upstream_configuration,
            httpx.MockTransport(completion_api.handler),
        )
        yield test_client
