"""Models for prompt history records."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HistoryEntry(BaseModel):
    """Model representing a history entry that has not been stored yet.

    Attributes:
        prompt: The submitted prompt text
        model: Model identification
        timestamp: Point in time of the generation; anything else than
            `datetime` is replaced by the current time when stored
        tokens_used: Total token count reported by the completion API
        parameters: The exact parameter set sent to the completion API
        response: The generated text
    """

    model_config = ConfigDict(protected_namespaces=())

    prompt: str
    model: str
    timestamp: Any = None
    tokens_used: int = 0
    parameters: dict[str, Any] = Field(default_factory=dict)
    response: str = ""


class HistoryRecord(BaseModel):
    """Model representing a stored history record.

    Records are immutable; only the history cache creates them.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        protected_namespaces=(),
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "prompt": "Write a haiku about llamas",
                    "model": "meta-llama/Llama-3.3-70B-Instruct-Turbo",
                    "timestamp": "2024-01-01T00:00:00Z",
                    "tokensUsed": 42,
                    "parameters": {"model": "meta-llama/Llama-3.3-70B-Instruct-Turbo"},
                    "response": "Soft wool on the hills",
                }
            ]
        },
    )

    id: int = Field(description="Unique record ID, assigned when stored")
    prompt: str
    model: str
    timestamp: datetime
    tokens_used: int = Field(0, alias="tokensUsed")
    parameters: dict[str, Any] = Field(default_factory=dict)
    response: str = ""

    def sort_key(self) -> tuple[datetime, int]:
        """Return key ordering records from the oldest to the most recent one."""
        return (self.timestamp, self.id)
