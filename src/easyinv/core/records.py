"""Helpers for stamping, filtering and trimming inventory records."""

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from easyinv.core.models import InventoryFilter, InventoryRecord

DEFAULT_SOURCE = "Unknown"

# Query parameter name -> record field, applied in this order.
FILTER_FIELDS: tuple[tuple[str, str], ...] = (
    ("site", "site"),
    ("floor", "floor"),
    ("room", "room"),
    ("shelf", "shelf"),
    ("product", "productBarcode"),
)


def utc_now_iso() -> str:
    """Return the current UTC time as ISO-8601 with milliseconds and a Z suffix.

    Example: 2024-05-01T12:30:45.123Z
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def stamp_record(
    data: Mapping[str, Any],
    received_at: str,
    source: str | None = None,
) -> InventoryRecord:
    """Copy an incoming payload and attach ingestion metadata.

    The server-side keys win over client-supplied keys of the same name.

    Args:
        data: Fields sent by the scanner.
        received_at: Ingestion timestamp (ISO-8601).
        source: Origin label. Missing or empty becomes "Unknown".

    Returns:
        A new record dict.
    """
    return {
        **data,
        "receivedAt": received_at,
        "source": source or DEFAULT_SOURCE,
    }


def filter_records(
    records: Iterable[InventoryRecord], criteria: InventoryFilter
) -> list[InventoryRecord]:
    """Apply exact-match filters, AND-combined, preserving insertion order.

    Matching is case-sensitive and type-strict: a stored integer floor 3 does
    not match the query string "3".
    """
    filtered = list(records)
    for param, field_name in FILTER_FIELDS:
        wanted = getattr(criteria, param)
        if not wanted:
            continue
        filtered = [r for r in filtered if r.get(field_name) == wanted]
    return filtered


def take_last(items: Sequence[Any], limit: int | None) -> list[Any]:
    """Keep only the trailing `limit` items, in their original order.

    None means no limit. A limit of 0 returns an empty list.
    """
    if limit is None:
        return list(items)
    if limit <= 0:
        return []
    return list(items[-limit:])
