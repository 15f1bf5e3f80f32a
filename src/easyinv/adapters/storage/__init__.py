"""Storage adapters implementing core ports."""

from easyinv.adapters.storage.in_memory import (
    InMemoryInventoryStorage,
    InMemoryRequestLogStorage,
)

__all__ = [
    "InMemoryInventoryStorage",
    "InMemoryRequestLogStorage",
]
