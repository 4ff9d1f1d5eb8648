"""In-memory prompt history implementation."""

import threading
from typing import Optional

import constants
from cache.cache import HistoryCache
from models.history import HistoryEntry, HistoryRecord
from log import get_logger

logger = get_logger("cache.in_memory_cache")


class InMemoryHistoryCache(HistoryCache):
    """Prompt history kept in process memory.

    The ID counter and the record mapping are guarded by a single lock, so
    concurrent savers never get the same ID.
    """

    def __init__(self, max_entries: Optional[int] = None) -> None:
        """Create a new instance of in-memory prompt history.

        Args:
            max_entries: Maximum number of records to keep, unbounded if None.
        """
        self.max_entries = max_entries
        self._records: dict[int, HistoryRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def save(self, entry: HistoryEntry) -> HistoryRecord:
        """Store the history entry under the next unused ID."""
        with self._lock:
            record = self.make_record(self._next_id, entry)
            self._next_id += 1
            self._records[record.id] = record
            self._evict()
        logger.debug("Saved history record %d", record.id)
        return record

    def _evict(self) -> None:
        """Drop the oldest records over the configured bound; lock must be held."""
        if self.max_entries is None:
            return
        overflow = len(self._records) - self.max_entries
        if overflow <= 0:
            return
        oldest = sorted(self._records.values(), key=HistoryRecord.sort_key)
        for record in oldest[:overflow]:
            del self._records[record.id]
        logger.debug("Evicted %d history records", overflow)

    def list(
        self, limit: int = constants.DEFAULT_HISTORY_LIMIT
    ) -> list[HistoryRecord]:
        """List stored records, the most recent one first."""
        if limit <= 0:
            return []
        with self._lock:
            records = list(self._records.values())
        records.sort(key=HistoryRecord.sort_key, reverse=True)
        return records[:limit]

    def clear(self) -> None:
        """Delete all stored records, the ID counter is kept."""
        with self._lock:
            count = len(self._records)
            self._records.clear()
        logger.info("Cleared %d history records", count)

    def __len__(self) -> int:
        """Return number of stored records."""
        return len(self._records)

    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True in all cases.
        """
        return True
