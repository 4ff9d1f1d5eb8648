"""Configuration loader."""

import logging
import os
from typing import Any, Mapping, Optional

import yaml
from models.config import (
    Configuration,
    HistoryConfiguration,
    InferenceConfiguration,
    ServiceConfiguration,
    UpstreamConfiguration,
)

import constants
from cache.cache import HistoryCache
from cache.cache_factory import HistoryCacheFactory


logger = logging.getLogger(__name__)


class LogicError(Exception):
    """Error in application logic."""


def apply_environment_overrides(
    config_dict: dict[str, Any], environ: Mapping[str, str]
) -> dict[str, Any]:
    """Return configuration dictionary updated by environment variables.

    TOGETHER_API_KEY sets the default API key, PORT the listening port and
    PLAYGROUND_ENV the runtime mode; any mode other than production is taken
    as development. Blank variables are ignored.
    """
    result = dict(config_dict)

    def section(name: str) -> dict[str, Any]:
        result[name] = dict(result.get(name) or {})
        return result[name]

    api_key = environ.get(constants.ENV_API_KEY, "").strip()
    if api_key:
        section("upstream")["api_key"] = api_key

    port = environ.get(constants.ENV_PORT, "").strip()
    if port:
        section("service")["port"] = port

    mode = environ.get(constants.ENV_RUNTIME_MODE, "").strip().lower()
    if mode:
        if mode not in (constants.MODE_DEVELOPMENT, constants.MODE_PRODUCTION):
            logger.warning(
                "Unknown runtime mode %s=%s, using %s",
                constants.ENV_RUNTIME_MODE,
                mode,
                constants.MODE_DEVELOPMENT,
            )
            mode = constants.MODE_DEVELOPMENT
        section("service")["environment"] = mode

    return result


class AppConfig:
    """Singleton class to load and store the configuration."""

    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "AppConfig":
        """Create a new instance of the class."""
        if not isinstance(cls._instance, cls):
            cls._instance = super().__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the class instance."""
        self._configuration: Optional[Configuration] = None
        self._history_cache: Optional[HistoryCache] = None

    def load_configuration(
        self,
        filename: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Load configuration from optional YAML file and environment."""
        config_dict: dict[str, Any] = {}
        if filename:
            with open(filename, encoding="utf-8") as fin:
                config_dict = yaml.safe_load(fin) or {}
            logger.info("Loaded configuration from %s", filename)
        config_dict = apply_environment_overrides(
            config_dict, os.environ if environ is None else environ
        )
        self.init_from_dict(config_dict)

    def init_from_dict(self, config_dict: dict[Any, Any]) -> None:
        """Initialize configuration from a dictionary."""
        self._configuration = Configuration(**config_dict)
        # history belongs to the configuration it was created for
        self._history_cache = None

    def is_loaded(self) -> bool:
        """Check if configuration is loaded."""
        return self._configuration is not None

    @property
    def configuration(self) -> Configuration:
        """Return the whole configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration

    @property
    def service_configuration(self) -> ServiceConfiguration:
        """Return service configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.service

    @property
    def upstream_configuration(self) -> UpstreamConfiguration:
        """Return completion API configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.upstream

    @property
    def history_configuration(self) -> HistoryConfiguration:
        """Return prompt history configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.history

    @property
    def inference(self) -> InferenceConfiguration:
        """Return inference configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.inference

    @property
    def history_cache(self) -> HistoryCache:
        """Return the prompt history, creating it on first use."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        if self._history_cache is None:
            self._history_cache = HistoryCacheFactory.history_cache(
                self._configuration.history
            )
        return self._history_cache

    def check_api_key(self) -> None:
        """Fail when default API key is required but not configured."""
        upstream = self.upstream_configuration
        if upstream.require_api_key and not upstream.has_api_key:
            raise LogicError(
                f"Missing required environment variables: {constants.ENV_API_KEY}. "
                "Please set it in the environment or in the configuration file."
            )


configuration: AppConfig = AppConfig()
