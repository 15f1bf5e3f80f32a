"""In-memory storage adapters for inventory records and the request log."""

import threading
from collections.abc import AsyncIterable, Sequence

from easyinv.core.models import InventoryRecord, LogEntry


class InMemoryInventoryStorage:
    """In-memory implementation of InventoryStoragePort.

    Stores records in a list guarded by a lock, so bulk appends and clears
    stay atomic even when handlers run in a thread pool. Contents are lost
    when the process exits.
    """

    def __init__(self) -> None:
        self._records: list[InventoryRecord] = []
        self._lock = threading.Lock()

    async def append(self, record: InventoryRecord) -> int:
        """Append one record and return its 0-based position."""
        with self._lock:
            self._records.append(record)
            return len(self._records) - 1

    async def extend(self, records: Sequence[InventoryRecord]) -> int:
        """Append all records atomically and return how many were added."""
        with self._lock:
            self._records.extend(records)
        return len(records)

    async def clear(self) -> int:
        """Remove every record and return how many were removed."""
        with self._lock:
            removed = len(self._records)
            self._records = []
        return removed

    async def read(self) -> AsyncIterable[InventoryRecord]:
        """Read a snapshot of all records in insertion order."""
        with self._lock:
            snapshot = list(self._records)
        for record in snapshot:
            yield record

    async def count(self) -> int:
        """Return the number of stored records."""
        with self._lock:
            return len(self._records)


class InMemoryRequestLogStorage:
    """In-memory implementation of RequestLogStoragePort.

    Unbounded and append-only. Suitable for a single-process service where
    the log only needs to live as long as the process.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []
        self._lock = threading.Lock()

    async def write(self, entry: LogEntry) -> None:
        """Write a log entry to storage."""
        with self._lock:
            self._entries.append(entry)

    async def read(self, limit: int | None = None) -> AsyncIterable[LogEntry]:
        """Read log entries in insertion order.

        Returns the trailing `limit` entries, or all of them when limit is None.
        """
        with self._lock:
            snapshot = list(self._entries)
        if limit is not None:
            snapshot = snapshot[-limit:] if limit > 0 else []
        for entry in snapshot:
            yield entry

    async def count(self) -> int:
        """Return the number of log entries."""
        with self._lock:
            return len(self._entries)
