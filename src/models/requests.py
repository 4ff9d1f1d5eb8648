"""Models for REST API requests."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat

import constants


class GenerationParameters(BaseModel):
    """Model representing generation parameters sent to the completion API.

    Attributes:
        model: The model identifier.
        max_tokens: Maximum number of tokens to generate.
        temperature: Sampling temperature.
        top_p: Nucleus sampling probability mass.
        top_k: Number of most likely tokens considered at each step.
        repetition_penalty: Penalty applied to repeated tokens.
        frequency_penalty: The optional frequency penalty (0 when not set).
        stop: The optional stop sequence.
    """

    model: str = Field(
        min_length=1,
        description="Model identifier",
        examples=[constants.DEFAULT_MODEL],
    )

    max_tokens: int = Field(
        strict=True,
        ge=constants.MAX_TOKENS_MIN,
        le=constants.MAX_TOKENS_MAX,
        description="Maximum number of tokens to generate",
        examples=[256],
    )

    temperature: float = Field(
        strict=True,
        ge=constants.TEMPERATURE_MIN,
        le=constants.TEMPERATURE_MAX,
        description="Sampling temperature",
        examples=[0.7],
    )

    top_p: float = Field(
        strict=True,
        ge=constants.TOP_P_MIN,
        le=constants.TOP_P_MAX,
        description="Nucleus sampling probability mass",
        examples=[0.8],
    )

    top_k: int = Field(
        strict=True,
        ge=constants.TOP_K_MIN,
        le=constants.TOP_K_MAX,
        description="Number of most likely tokens considered at each step",
        examples=[40],
    )

    repetition_penalty: float = Field(
        strict=True,
        ge=constants.REPETITION_PENALTY_MIN,
        le=constants.REPETITION_PENALTY_MAX,
        description="Penalty applied to repeated tokens",
        examples=[1.0],
    )

    frequency_penalty: Optional[StrictFloat] = Field(
        None,
        ge=constants.FREQUENCY_PENALTY_MIN,
        le=constants.FREQUENCY_PENALTY_MAX,
        description="The optional frequency penalty, 0 when not set",
        examples=[0.0],
    )

    stop: Optional[str] = Field(
        None,
        description="The optional sequence signaling early stop",
        examples=["</s>"],
    )

    model_config = ConfigDict(
        extra="forbid",
        # "model" is a regular field name here
        protected_namespaces=(),
    )

    def effective_frequency_penalty(self) -> float:
        """Return the frequency penalty with the default substituted."""
        if self.frequency_penalty is None:
            return constants.DEFAULT_FREQUENCY_PENALTY
        return self.frequency_penalty

    def effective_stop(self) -> Optional[str]:
        """Return the stop sequence, or None when it is absent or empty."""
        return self.stop or None


class GenerationRequest(BaseModel):
    """Model representing a request to generate text.

    Attributes:
        prompt: The prompt text.
        parameters: The generation parameters.
        api_key: The optional API key; the configured key is used if missing.

    Example:
        ```python
        generation_request = GenerationRequest(
            prompt="Tell me about llamas",
            parameters=GenerationParameters(
                model="meta-llama/Llama-3.3-70B-Instruct-Turbo",
                max_tokens=256,
                temperature=0.7,
                top_p=0.8,
                top_k=40,
                repetition_penalty=1.0,
            ),
        )
        ```
    """

    prompt: str = Field(
        min_length=1,
        description="The prompt text",
        examples=["Write a haiku about llamas"],
    )

    parameters: GenerationParameters

    api_key: Optional[str] = Field(
        None,
        alias="apiKey",
        description="The optional API key overriding the configured one",
        examples=["tgp_v1_xyzzy"],
    )

    # provides examples for /docs endpoint
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "prompt": "Write a haiku about llamas",
                    "parameters": {
                        "model": constants.DEFAULT_MODEL,
                        "max_tokens": 256,
                        "temperature": 0.7,
                        "top_p": 0.8,
                        "top_k": 40,
                        "repetition_penalty": 1.0,
                        "frequency_penalty": 0.0,
                        "stop": None,
                    },
                    "apiKey": None,
                }
            ]
        },
    }

    def supplied_api_key(self) -> Optional[str]:
        """Return the API key from the request unless it is blank."""
        if self.api_key is None or not self.api_key.strip():
            return None
        return self.api_key.strip()
