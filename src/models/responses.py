"""Models for REST API responses."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from models.history import HistoryRecord
from models.requests import GenerationParameters


class GenerateResponse(BaseModel):
    """Model representing text generated by the completion API.

    Attributes:
        text: The generated text.
        headers: Completion API response headers, used by the debug view.
        body: Raw completion API response body, used by the debug view.
        usage: Token usage statistics reported by the completion API.
    """

    text: str = Field(
        description="Generated text",
        examples=["Soft wool on the hills"],
    )

    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Completion API response headers",
        examples=[{"content-type": "application/json"}],
    )

    body: dict[str, Any] = Field(
        default_factory=dict,
        description="Raw completion API response body",
    )

    usage: Optional[dict[str, Any]] = Field(
        None,
        description="Token usage statistics",
        examples=[{"prompt_tokens": 10, "completion_tokens": 32, "total_tokens": 42}],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": "Soft wool on the hills",
                    "headers": {"content-type": "application/json"},
                    "body": {
                        "id": "cmpl-123",
                        "object": "text_completion",
                        "choices": [
                            {
                                "text": "Soft wool on the hills",
                                "index": 0,
                                "finish_reason": "stop",
                            }
                        ],
                        "usage": {
                            "prompt_tokens": 10,
                            "completion_tokens": 32,
                            "total_tokens": 42,
                        },
                    },
                    "usage": {
                        "prompt_tokens": 10,
                        "completion_tokens": 32,
                        "total_tokens": 42,
                    },
                }
            ]
        }
    }


class HistoryResponse(BaseModel):
    """Model representing prompt history, the most recent record first."""

    history: list[HistoryRecord] = Field(
        default_factory=list,
        description="History records, the most recent one first",
    )


class HistoryClearedResponse(BaseModel):
    """Model representing a response to history clearing."""

    message: str = Field(
        description="Acknowledgment message",
        examples=["History cleared successfully"],
    )


class ErrorResponse(BaseModel):
    """Model representing error response.

    Attributes:
        error: Short error description.
        details: Optional structured error details.
    """

    error: str = Field(
        description="Error description",
        examples=["Invalid request parameters"],
    )

    details: Optional[dict[str, Any]] = Field(
        None,
        description="Error details",
        examples=[{"parameters.max_tokens": ["Input should be less than or equal to 4096"]}],
    )


class UpstreamErrorResponse(ErrorResponse):
    """Model representing completion API failure with raw data for the debug view."""

    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Completion API response headers",
    )

    body: Any = Field(
        None,
        description="Raw completion API response body",
        examples=[{"message": "bad model"}],
    )


class InfoResponse(BaseModel):
    """Model representing a response to an info request.

    Attributes:
        name: Service name.
        service_version: Service version.

    Example:
        ```python
        info_response = InfoResponse(
            name="LLM Playground",
            service_version="1.0.0",
        )
        ```
    """

    name: str = Field(
        description="Service name",
        examples=["LLM Playground"],
    )

    service_version: str = Field(
        description="Service version",
        examples=["0.1.0", "0.2.0", "1.0.0"],
    )


class ModelsResponse(BaseModel):
    """Model representing models offered by the playground."""

    models: list[str] = Field(
        ...,
        description="List of models available",
        examples=[["meta-llama/Llama-3.3-70B-Instruct-Turbo"]],
    )

    default_model: str = Field(
        ...,
        description="Model selected by default",
        examples=["meta-llama/Llama-3.3-70B-Instruct-Turbo"],
    )

    default_parameters: GenerationParameters = Field(
        ...,
        description="Generation parameters selected by default",
    )


class ReadinessResponse(BaseModel):
    """Model representing response to a readiness request.

    Attributes:
        ready: If service is ready.
        reason: The reason for the readiness.
    """

    ready: bool = Field(
        ...,
        description="Flag indicating if service is ready",
        examples=[True, False],
    )

    reason: str = Field(
        ...,
        description="The reason for the readiness",
        examples=["Service is ready"],
    )


class LivenessResponse(BaseModel):
    """Model representing a response to a liveness request.

    Attributes:
        alive: If app is alive.

    Example:
        ```python
        liveness_response = LivenessResponse(alive=True)
        ```
    """

    alive: bool = Field(
        ...,
        description="Flag indicating that the app is alive",
        examples=[True, False],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "alive": True,
                }
            ]
        }
    }
