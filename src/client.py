"""Completion API client retrieval."""

import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, Field

import constants
from errors import UpstreamError
from models.config import UpstreamConfiguration
from models.requests import GenerationParameters
from utils.types import Singleton


logger = logging.getLogger(__name__)


class CompletionResult(BaseModel):
    """Successful completion API response.

    Attributes:
        text: First choice's generated text, empty if there is none.
        usage: Usage statistics as reported by the completion API.
        tokens_used: Total token count, 0 if not reported.
        headers: Response headers, kept for the debug view.
        body: Parsed response body, kept for the debug view.
    """

    text: str = ""
    usage: Optional[dict[str, Any]] = None
    tokens_used: int = 0
    headers: dict[str, str] = Field(default_factory=dict)
    body: dict[str, Any] = Field(default_factory=dict)


def build_request_body(prompt: str, parameters: GenerationParameters) -> dict[str, Any]:
    """Return request body sent to the completion API."""
    return {
        "model": parameters.model,
        "prompt": prompt,
        "max_tokens": parameters.max_tokens,
        "temperature": parameters.temperature,
        "top_p": parameters.top_p,
        "top_k": parameters.top_k,
        "repetition_penalty": parameters.repetition_penalty,
        "stop": parameters.effective_stop(),
        "frequency_penalty": parameters.effective_frequency_penalty(),
    }


def upstream_error_message(body: Any) -> str:
    """Retrieve error message reported by the completion API."""
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
        error = body.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message:
                return message
        if isinstance(error, str) and error:
            return error
    return constants.UPSTREAM_ERROR


def _total_tokens(usage: Optional[dict[str, Any]]) -> int:
    if not usage:
        return 0
    total = usage.get("total_tokens")
    # bool is an int subclass
    if isinstance(total, int) and not isinstance(total, bool):
        return total
    return 0


def _first_choice_text(body: dict[str, Any]) -> str:
    choices = body.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    choice = choices[0]
    if not isinstance(choice, dict):
        return ""
    text = choice.get("text")
    return text if isinstance(text, str) else ""


class CompletionClient:
    """Client calling the completion API once per generation request."""

    def __init__(
        self,
        completions_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Create client for the given completions endpoint.

        No timeout is set, a slow completion API simply delays the response.
        """
        self.completions_url = completions_url
        self._http = httpx.AsyncClient(timeout=None, transport=transport)

    async def complete(
        self, prompt: str, parameters: GenerationParameters, api_key: str
    ) -> CompletionResult:
        """Send prompt with generation parameters to the completion API.

        Raises:
            UpstreamError: when the completion API returns non-success status.
            httpx.HTTPError: on transport level failures.
        """
        request_body = build_request_body(prompt, parameters)
        logger.debug(
            "Calling completion API %s with model %s",
            self.completions_url,
            parameters.model,
        )
        response = await self._http.post(
            self.completions_url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
            json=request_body,
        )
        headers = dict(response.headers.items())
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text

        if not response.is_success:
            message = upstream_error_message(body)
            logger.warning(
                "Completion API returned status %d: %s", response.status_code, message
            )
            raise UpstreamError(response.status_code, message, headers, body)

        if not isinstance(body, dict):
            logger.warning("Completion API returned malformed body")
            raise UpstreamError(
                response.status_code,
                constants.MALFORMED_UPSTREAM_RESPONSE,
                headers,
                body,
            )

        usage = body.get("usage")
        if not isinstance(usage, dict):
            usage = None
        return CompletionResult(
            text=_first_choice_text(body),
            usage=usage,
            tokens_used=_total_tokens(usage),
            headers=headers,
            body=body,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()


class CompletionClientHolder(metaclass=Singleton):
    """Container for an initialised CompletionClient."""

    _client: Optional[CompletionClient] = None

    def load(
        self,
        upstream_config: UpstreamConfiguration,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Create completion API client according to configuration."""
        logger.info("Using completion API at %s", upstream_config.completions_url)
        self._client = CompletionClient(upstream_config.completions_url, transport)

    def get_client(self) -> CompletionClient:
        """Return an initialised CompletionClient."""
        if not self._client:
            raise RuntimeError(
                "CompletionClient has not been initialised. Ensure 'load(..)' has been called."
            )
        return self._client

    async def close(self) -> None:
        """Close and forget the client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
