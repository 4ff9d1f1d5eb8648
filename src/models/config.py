"""Model with service configuration."""

from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    SecretStr,
    model_validator,
)
from typing_extensions import Self, Literal

import constants
from models.requests import GenerationParameters


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class CORSConfiguration(ConfigurationBase):
    """CORS configuration."""

    allow_origins: list[str] = [
        "*"
    ]  # not AnyHttpUrl: we need to support "*" that is not valid URL
    allow_credentials: bool = False
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @model_validator(mode="after")
    def check_cors_configuration(self) -> Self:
        """Check CORS configuration."""
        # credentials are not allowed with wildcard origins
        # see https://fastapi.tiangolo.com/tutorial/cors/
        if self.allow_credentials and "*" in self.allow_origins:
            raise ValueError(
                "Invalid CORS configuration: allow_credentials can not be set to true when "
                "allow origins contains '*' wildcard."
                "Use explicit origins or disable credential."
            )
        return self


class ServiceConfiguration(ConfigurationBase):
    """Service configuration."""

    host: str = "localhost"
    port: PositiveInt = constants.DEFAULT_PORT
    workers: PositiveInt = 1
    color_log: bool = True
    access_log: bool = True
    environment: Literal["development", "production"] = constants.MODE_DEVELOPMENT
    cors: CORSConfiguration = Field(default_factory=CORSConfiguration)

    @model_validator(mode="after")
    def check_service_configuration(self) -> Self:
        """Check service configuration."""
        if self.port > 65535:
            raise ValueError("Port value should be less than 65536")
        return self

    @property
    def is_production(self) -> bool:
        """Return True when the service runs in production mode."""
        return self.environment == constants.MODE_PRODUCTION


class UpstreamConfiguration(ConfigurationBase):
    """Completion API configuration."""

    completions_url: str = constants.DEFAULT_COMPLETIONS_URL
    api_key: Optional[SecretStr] = None
    # refuse to start when no default key is configured
    require_api_key: bool = True
    # pass upstream error status through instead of answering 400
    propagate_error_status: bool = False

    @model_validator(mode="after")
    def check_upstream_configuration(self) -> Self:
        """Check completion API configuration."""
        if not self.completions_url.startswith(("http://", "https://")):
            raise ValueError(
                f"Completions URL must be HTTP(S) URL: {self.completions_url}"
            )
        # blank key is the same as no key at all
        if self.api_key is not None and not self.api_key.get_secret_value().strip():
            self.api_key = None
        return self

    @property
    def has_api_key(self) -> bool:
        """Check if default API key is configured."""
        return self.api_key is not None


class HistoryConfiguration(ConfigurationBase):
    """Prompt history configuration."""

    type: Literal["memory", "noop"] = constants.HISTORY_TYPE_MEMORY
    default_limit: PositiveInt = constants.DEFAULT_HISTORY_LIMIT
    max_entries: Optional[PositiveInt] = None

    @model_validator(mode="after")
    def check_history_configuration(self) -> Self:
        """Check prompt history configuration."""
        if self.type == constants.HISTORY_TYPE_NOOP and self.max_entries is not None:
            raise ValueError("max_entries can not be set when history is disabled")
        return self


def default_generation_parameters() -> GenerationParameters:
    """Return generation parameters offered to new playground sessions."""
    return GenerationParameters(
        model=constants.DEFAULT_MODEL,
        max_tokens=256,
        temperature=0.7,
        top_p=0.8,
        top_k=40,
        repetition_penalty=1.0,
        frequency_penalty=0.0,
    )


class InferenceConfiguration(ConfigurationBase):
    """Inference configuration."""

    models: list[str] = Field(
        default_factory=lambda: list(constants.AVAILABLE_MODELS)
    )
    default_parameters: GenerationParameters = Field(
        default_factory=default_generation_parameters
    )

    @model_validator(mode="after")
    def check_default_model(self) -> Self:
        """Check that the default model is part of the model list."""
        if not self.models:
            raise ValueError("At least one model must be specified")
        if self.default_parameters.model not in self.models:
            raise ValueError(
                f"Default model {self.default_parameters.model} is not in the model list"
            )
        return self

    @property
    def default_model(self) -> str:
        """Return the model selected by default."""
        return self.default_parameters.model


class Configuration(ConfigurationBase):
    """Global service configuration."""

    name: str = "LLM Playground"
    service: ServiceConfiguration = Field(default_factory=ServiceConfiguration)
    upstream: UpstreamConfiguration = Field(default_factory=UpstreamConfiguration)
    history: HistoryConfiguration = Field(default_factory=HistoryConfiguration)
    inference: InferenceConfiguration = Field(default_factory=InferenceConfiguration)

    def dump(self, filename: str = "configuration.json") -> None:
        """Dump actual configuration into JSON file."""
        with open(filename, "w", encoding="utf-8") as fout:
            fout.write(self.model_dump_json(indent=4))
