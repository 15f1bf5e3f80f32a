"""CSV encoder for inventory export."""

from collections.abc import Iterable
from typing import Any

from easyinv.core.models import InventoryRecord

CSV_HEADERS = [
    "Timestamp",
    "Site",
    "Floor",
    "Room",
    "Shelf",
    "Product_Barcode",
    "Quantity",
    "Received_At",
]

NULL_TEXT = "NULL"


def _render(value: Any) -> str:
    """Render a scalar the way the scanner app writes it (true, 5, 2.5)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _quoted(value: Any, fallback: str, escape: bool) -> str:
    text = _render(value) if value else fallback
    if escape:
        text = text.replace('"', '""')
    return f'"{text}"'


def encode_row(record: InventoryRecord, escape: bool = False) -> str:
    """Encode a single record as one CSV line (no line terminator).

    Args:
        record: The inventory record.
        escape: Double embedded quotes (RFC 4180). Off by default, which
            keeps the legacy output where quotes and commas are written raw.
    """
    fields = [
        _quoted(record.get("timestamp"), "", escape),
        _quoted(record.get("site"), NULL_TEXT, escape),
        _quoted(record.get("floor"), NULL_TEXT, escape),
        _quoted(record.get("room"), NULL_TEXT, escape),
        _quoted(record.get("shelf"), NULL_TEXT, escape),
        _quoted(record.get("productBarcode"), "", escape),
        _render(record.get("quantity") or 0),
        _quoted(record.get("receivedAt"), "", escape),
    ]
    return ",".join(fields)


def encode_csv(records: Iterable[InventoryRecord], escape: bool = False) -> str:
    """Encode inventory records to CSV text.

    Args:
        records: Records in insertion order.
        escape: See encode_row.

    Returns:
        Header line followed by one line per record, joined with "\\n".
        There is no trailing newline.
    """
    lines = [",".join(CSV_HEADERS)]
    lines.extend(encode_row(record, escape=escape) for record in records)
    return "\n".join(lines)
