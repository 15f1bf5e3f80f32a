"""Aggregate statistics over inventory records."""

from collections.abc import Sequence
from typing import Any

from easyinv.core.models import InventoryRecord, InventoryStats


def _quantity(record: InventoryRecord) -> int | float:
    value = record.get("quantity")
    # bool is an int subclass; a flag is not a quantity
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def _distinct(values: list[Any]) -> list[Any]:
    """Distinct values in first-seen order.

    Hashable values are deduplicated through a dict. Unhashable ones (lists,
    dicts) fall back to list membership among themselves.
    """
    seen: dict[Any, None] = {}
    seen_unhashable: list[Any] = []
    distinct: list[Any] = []
    for value in values:
        try:
            if value in seen:
                continue
            seen[value] = None
        except TypeError:
            if value in seen_unhashable:
                continue
            seen_unhashable.append(value)
        distinct.append(value)
    return distinct


def _distinct_truthy(records: Sequence[InventoryRecord], field_name: str) -> list[Any]:
    return _distinct([r.get(field_name) for r in records if r.get(field_name)])


def compute_stats(records: Sequence[InventoryRecord]) -> InventoryStats:
    """Compute statistics fresh from a snapshot of the store.

    Records without a productBarcode are counted together as one distinct
    (absent) barcode.
    """
    return InventoryStats(
        total_records=len(records),
        total_products=sum(_quantity(r) for r in records),
        unique_products=len(_distinct([r.get("productBarcode") for r in records])),
        sites=_distinct_truthy(records, "site"),
        floors=_distinct_truthy(records, "floor"),
        rooms=_distinct_truthy(records, "room"),
        shelves=_distinct_truthy(records, "shelf"),
        last_update=records[-1].get("receivedAt") if records else None,
    )
