"""Core domain models for inventory scan data."""

from dataclasses import dataclass
from typing import Any

# Records are schemaless; whatever the scanner sends is kept verbatim.
InventoryRecord = dict[str, Any]


@dataclass(frozen=True)
class LogEntry:
    """A single inbound request, as seen by the request logger.

    Attributes:
        timestamp: ISO-8601 UTC time the request arrived.
        method: HTTP method (e.g., GET, POST).
        path: Request path without the query string.
        ip: Client address, or None when the server does not report one.
        user_agent: User-Agent header value, or None when absent.
    """

    timestamp: str
    method: str
    path: str
    ip: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True)
class InventoryFilter:
    """Exact-match filters for the inventory query.

    Empty strings are treated the same as None (filter not applied).
    """

    site: str | None = None
    floor: str | None = None
    room: str | None = None
    shelf: str | None = None
    product: str | None = None


@dataclass(frozen=True)
class InventoryStats:
    """Aggregate statistics over the whole inventory store.

    Attributes:
        total_records: Number of stored records.
        total_products: Sum of numeric quantities.
        unique_products: Number of distinct product barcodes.
        sites: Distinct non-empty sites, first-seen order.
        floors: Distinct non-empty floors, first-seen order.
        rooms: Distinct non-empty rooms, first-seen order.
        shelves: Distinct non-empty shelves, first-seen order.
        last_update: receivedAt of the newest record, None when empty.
    """

    total_records: int
    total_products: int | float
    unique_products: int
    sites: list[Any]
    floors: list[Any]
    rooms: list[Any]
    shelves: list[Any]
    last_update: str | None
