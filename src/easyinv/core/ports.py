"""Port interfaces for storage adapters.

These protocols define the contracts that storage adapters must implement.
Handlers and middleware depend only on these interfaces, so the in-memory
stores can later be swapped for a persistent backend.
"""

from collections.abc import AsyncIterable, Sequence
from typing import Protocol, runtime_checkable

from easyinv.core.models import InventoryRecord, LogEntry


@runtime_checkable
class InventoryStoragePort(Protocol):
    """Port for inventory record storage.

    The mutation surface is limited to append, extend and clear. Records are
    never modified once stored.
    """

    async def append(self, record: InventoryRecord) -> int:
        """Append one record and return its 0-based position."""
        ...

    async def extend(self, records: Sequence[InventoryRecord]) -> int:
        """Append all records atomically and return how many were added."""
        ...

    async def clear(self) -> int:
        """Remove every record and return how many were removed."""
        ...

    def read(self) -> AsyncIterable[InventoryRecord]:
        """Read a snapshot of all records in insertion order."""
        ...

    async def count(self) -> int:
        """Return the number of stored records."""
        ...


@runtime_checkable
class RequestLogStoragePort(Protocol):
    """Port for the request log.

    Append-only. There is no purge operation.
    """

    async def write(self, entry: LogEntry) -> None:
        """Write a log entry to storage."""
        ...

    def read(self, limit: int | None = None) -> AsyncIterable[LogEntry]:
        """Read log entries in insertion order.

        Args:
            limit: When given, only the trailing `limit` entries are returned.
                   None returns all entries.
        """
        ...

    async def count(self) -> int:
        """Return the number of log entries."""
        ...
