"""Prompt history factory class."""

import constants
from models.config import HistoryConfiguration
from cache.cache import HistoryCache
from cache.noop_cache import NoopHistoryCache
from cache.in_memory_cache import InMemoryHistoryCache
from log import get_logger

logger = get_logger("cache.cache_factory")


# pylint: disable=R0903
class HistoryCacheFactory:
    """Prompt history factory class."""

    @staticmethod
    def history_cache(config: HistoryConfiguration) -> HistoryCache:
        """Create an instance of HistoryCache based on loaded configuration.

        Returns:
            An instance of `HistoryCache` (either `InMemoryHistoryCache` or
            `NoopHistoryCache`).
        """
        logger.info("Creating history cache instance of type %s", config.type)
        match config.type:
            case constants.HISTORY_TYPE_NOOP:
                return NoopHistoryCache()
            case constants.HISTORY_TYPE_MEMORY:
                return InMemoryHistoryCache(config.max_entries)
            case _:
                raise ValueError(
                    f"Invalid history type: {config.type}. "
                    f"Use '{constants.HISTORY_TYPE_MEMORY}' or "
                    f"'{constants.HISTORY_TYPE_NOOP}' options."
                )
