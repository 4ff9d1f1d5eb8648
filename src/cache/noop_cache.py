"""Prompt history implementation that does not retain anything."""

import threading

import constants
from cache.cache import HistoryCache
from models.history import HistoryEntry, HistoryRecord
from log import get_logger

logger = get_logger("cache.noop_cache")


class NoopHistoryCache(HistoryCache):
    """No-operation prompt history, used when history is disabled."""

    def __init__(self) -> None:
        """Create a new instance of no-op prompt history."""
        self._next_id = 1
        self._lock = threading.Lock()

    def save(self, entry: HistoryEntry) -> HistoryRecord:
        """Return the record that would be stored; nothing is retained."""
        with self._lock:
            record = self.make_record(self._next_id, entry)
            self._next_id += 1
        return record

    def list(
        self, limit: int = constants.DEFAULT_HISTORY_LIMIT
    ) -> list[HistoryRecord]:
        """Return an empty list."""
        return []

    def clear(self) -> None:
        """Do nothing."""

    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True in all cases.
        """
        return True
