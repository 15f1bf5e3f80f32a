"""JSON encoders for inventory export and the request log."""

import json
from collections.abc import Iterable
from typing import Any

from easyinv.core.models import InventoryRecord, InventoryStats, LogEntry


def encode_records(records: Iterable[InventoryRecord]) -> str:
    """Encode records to a compact JSON array.

    Args:
        records: Records in insertion order.

    Returns:
        JSON text. "[]" if there are no records.

    Raises:
        ValueError: If a record holds NaN or an infinite float.
    """
    return json.dumps(
        list(records), separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )


def log_entry_to_dict(entry: LogEntry) -> dict[str, Any]:
    """Convert a LogEntry to its wire representation."""
    return {
        "timestamp": entry.timestamp,
        "method": entry.method,
        "path": entry.path,
        "ip": entry.ip,
        "userAgent": entry.user_agent,
    }


def stats_to_dict(stats: InventoryStats) -> dict[str, Any]:
    """Convert InventoryStats to its wire representation."""
    return {
        "totalRecords": stats.total_records,
        "totalProducts": stats.total_products,
        "uniqueProducts": stats.unique_products,
        "sites": stats.sites,
        "floors": stats.floors,
        "rooms": stats.rooms,
        "shelves": stats.shelves,
        "lastUpdate": stats.last_update,
    }
