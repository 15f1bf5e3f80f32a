"""Parsing and validation of inventory ingestion payloads."""

from dataclasses import dataclass, field
from typing import Any

from easyinv.core.models import InventoryRecord

ADD_INVENTORY = "add_inventory"
SYNC_INVENTORY = "sync_inventory"


class InvalidPayloadError(ValueError):
    """Raised when an ingestion body has an unknown action or wrong data shape."""


@dataclass(frozen=True)
class IngestCommand:
    """A validated ingestion request.

    Attributes:
        action: Either "add_inventory" or "sync_inventory".
        records: Raw record payloads, one for add, any number for sync.
        source: Origin label as sent by the client (may be None).
    """

    action: str
    records: list[InventoryRecord] = field(default_factory=list)
    source: str | None = None

    @property
    def is_bulk(self) -> bool:
        return self.action == SYNC_INVENTORY


def parse_ingest_payload(body: Any) -> IngestCommand:
    """Validate a decoded JSON body and turn it into an IngestCommand.

    Args:
        body: The decoded request body.

    Returns:
        IngestCommand ready to be applied to the store.

    Raises:
        InvalidPayloadError: If the body is not an object, the action is
            unknown, or `data` does not have the shape the action needs.
    """
    if not isinstance(body, dict):
        raise InvalidPayloadError("request body must be a JSON object")

    action = body.get("action")
    data = body.get("data")
    source = body.get("source")
    if not isinstance(source, str):
        source = None

    if action == ADD_INVENTORY:
        if not isinstance(data, dict):
            raise InvalidPayloadError("add_inventory requires a data object")
        return IngestCommand(action=action, records=[data], source=source)

    if action == SYNC_INVENTORY:
        if not isinstance(data, list):
            raise InvalidPayloadError("sync_inventory requires a data array")
        if not all(isinstance(item, dict) for item in data):
            raise InvalidPayloadError("sync_inventory items must be objects")
        return IngestCommand(action=action, records=list(data), source=source)

    raise InvalidPayloadError(f"unknown action: {action!r}")
