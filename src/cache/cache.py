"""Abstract class that is the parent for all prompt history implementations."""

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import Any

import constants
from models.history import HistoryEntry, HistoryRecord


class HistoryCache(ABC):
    """Abstract class that is the parent for all prompt history implementations.

    History records are identified by a synthetic integer ID that is assigned
    when a record is saved. IDs start at 1 and are never reused by the same
    cache instance, not even after the history is cleared.
    """

    @staticmethod
    def normalize_timestamp(timestamp: Any) -> datetime:
        """Return the timestamp as timezone-aware datetime.

        Anything that is not a `datetime` is replaced by the current time,
        naive datetimes are considered to be in UTC.
        """
        if not isinstance(timestamp, datetime):
            return datetime.now(UTC)
        if timestamp.tzinfo is None:
            return timestamp.replace(tzinfo=UTC)
        return timestamp

    @staticmethod
    def make_record(record_id: int, entry: HistoryEntry) -> HistoryRecord:
        """Construct the stored form of history entry."""
        return HistoryRecord(
            id=record_id,
            prompt=entry.prompt,
            model=entry.model,
            timestamp=HistoryCache.normalize_timestamp(entry.timestamp),
            tokens_used=entry.tokens_used,
            parameters=dict(entry.parameters),
            response=entry.response,
        )

    @abstractmethod
    def save(self, entry: HistoryEntry) -> HistoryRecord:
        """Store the history entry under the next unused ID.

        Args:
            entry: The `HistoryEntry` object to store.

        Returns:
            The stored `HistoryRecord` including its ID.
        """

    @abstractmethod
    def list(
        self, limit: int = constants.DEFAULT_HISTORY_LIMIT
    ) -> list[HistoryRecord]:
        """List stored records, the most recent one first.

        Args:
            limit: Maximum number of records to return. Zero or negative
                limit yields an empty list.

        Returns:
            List of `HistoryRecord` objects.
        """

    @abstractmethod
    def clear(self) -> None:
        """Delete all stored records."""

    @abstractmethod
    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True if the cache is ready, False otherwise.
        """
