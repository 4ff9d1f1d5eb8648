"""Errors reported to REST API clients."""

from typing import Any, Optional

from fastapi import status

import constants


class PlaygroundError(Exception):
    """Base class for errors rendered as JSON error responses.

    Attributes:
        status_code: HTTP status code of the response.
        error: Short error description, the `error` field of the response.
        details: Optional structured details, the `details` field.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, error: str, details: Optional[dict[str, Any]] = None) -> None:
        """Initialize the error with message and optional details."""
        super().__init__(error)
        self.error = error
        self.details = details

    def content(self) -> dict[str, Any]:
        """Return JSON content of the error response."""
        content: dict[str, Any] = {"error": self.error}
        if self.details is not None:
            content["details"] = self.details
        return content

    def render(self, production: bool) -> dict[str, Any]:
        """Return JSON content for the given runtime mode."""
        _ = production
        return self.content()


class InvalidRequestError(PlaygroundError):
    """Malformed or out-of-range request."""

    def __init__(self, details: Optional[dict[str, Any]] = None) -> None:
        """Initialize the error with field-level details."""
        super().__init__(constants.INVALID_REQUEST, details)


class KeyMissingError(PlaygroundError):
    """No usable API key in the request nor in configuration."""

    def __init__(self) -> None:
        """Initialize the error with the fixed message."""
        super().__init__(constants.API_KEY_MISSING)


class UpstreamError(PlaygroundError):
    """Completion API returned non-success status.

    Attributes:
        upstream_status: HTTP status returned by the completion API.
        headers: Completion API response headers.
        body: Completion API response body, parsed JSON if possible.
    """

    def __init__(
        self,
        upstream_status: int,
        message: str,
        headers: Optional[dict[str, str]] = None,
        body: Any = None,
    ) -> None:
        """Initialize the error with everything needed for the debug view."""
        super().__init__(message, {"status": upstream_status})
        self.upstream_status = upstream_status
        self.headers = headers or {}
        self.body = body

    def content(self) -> dict[str, Any]:
        """Return JSON content with raw upstream headers and body."""
        content = super().content()
        content["headers"] = self.headers
        content["body"] = self.body
        return content


class InternalError(PlaygroundError):
    """Unexpected fault; message is hidden in production mode."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        cause: Optional[BaseException] = None,
        error: str = constants.INTERNAL_ERROR,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """Initialize the error from its cause."""
        super().__init__(error, details)
        self.cause = cause

    def render(self, production: bool) -> dict[str, Any]:
        """Return JSON content, revealing the cause outside production."""
        content = self.content()
        if not production and self.cause is not None:
            content["details"] = {**(self.details or {}), "message": str(self.cause)}
        return content
