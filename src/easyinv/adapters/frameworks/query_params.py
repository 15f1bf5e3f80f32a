"""Shared query parameter parsing utilities for framework adapters.

Query values arrive as raw strings so that malformed input falls back to
defaults instead of producing validation errors.
"""

import re

from easyinv.core.models import InventoryFilter

DEFAULT_LOG_LIMIT = 50

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(raw: str | None) -> int | None:
    """Read the leading base-10 integer, ignoring anything after it.

    "2.5" reads as 2 and "5abc" as 5. A value with no leading digits is None.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1), 10)


def _parse_limit_param(raw: str | None) -> int | None:
    """Parse the inventory 'limit' query parameter.

    Args:
        raw: The raw query value, or None when absent.

    Returns:
        A non-negative integer, or None (no limit) when the value is missing,
        has no leading digits, or is negative.
    """
    value = _parse_int(raw)
    if value is None or value < 0:
        return None
    return value


def _parse_log_limit_param(raw: str | None) -> int:
    """Parse the logs 'limit' query parameter.

    Returns:
        A positive integer, defaulting to 50 for anything else.
    """
    value = _parse_int(raw)
    if value is None or value <= 0:
        return DEFAULT_LOG_LIMIT
    return value


def _parse_filter_params(
    site: str | None = None,
    floor: str | None = None,
    room: str | None = None,
    shelf: str | None = None,
    product: str | None = None,
) -> InventoryFilter:
    """Build an InventoryFilter, dropping empty values."""
    return InventoryFilter(
        site=site or None,
        floor=floor or None,
        room=room or None,
        shelf=shelf or None,
        product=product or None,
    )
