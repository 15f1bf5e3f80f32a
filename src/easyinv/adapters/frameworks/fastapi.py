"""FastAPI adapter exposing the inventory API under /api."""

import json
import logging
import math
import time
from typing import Any

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse

from easyinv.adapters.frameworks.auth import create_api_key_dependency
from easyinv.adapters.frameworks.query_params import (
    _parse_filter_params,
    _parse_limit_param,
    _parse_log_limit_param,
)
from easyinv.config import Settings
from easyinv.core.encoding.csv_export import encode_csv
from easyinv.core.encoding.json_export import (
    encode_records,
    log_entry_to_dict,
    stats_to_dict,
)
from easyinv.core.ingest import InvalidPayloadError, parse_ingest_payload
from easyinv.core.ports import InventoryStoragePort, RequestLogStoragePort
from easyinv.core.records import (
    filter_records,
    stamp_record,
    take_last,
    utc_now_iso,
)
from easyinv.core.stats import compute_stats

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def _invalid_format() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request format"},
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{text} overflows a JSON number")
    return value


def _is_json_request(request: Request) -> bool:
    """True when the declared media type is application/json."""
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == "application/json"


def _load_json_body(raw: bytes) -> Any:
    """Decode a request body as strict JSON.

    Raises:
        ValueError: If the body is not JSON, or uses NaN/Infinity or a
            number too large for a finite float.
    """
    return json.loads(
        raw, parse_constant=_reject_constant, parse_float=_finite_float
    )


def _attachment(body: str, media_type: str, extension: str) -> Response:
    """Build a download response named inventory_<epoch-ms>.<extension>."""
    filename = f"inventory_{int(time.time() * 1000)}.{extension}"
    return Response(
        content=body,
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def create_inventory_router(
    inventory_storage: InventoryStoragePort,
    log_storage: RequestLogStoragePort,
    settings: Settings,
) -> APIRouter:
    """Create a FastAPI router with the inventory, stats, logs and export endpoints.

    Args:
        inventory_storage: Storage adapter implementing InventoryStoragePort.
        log_storage: Storage adapter implementing RequestLogStoragePort.
        settings: Runtime settings (API-key gate, CSV escaping).

    Returns:
        APIRouter with every /api endpoint configured.
    """
    router = APIRouter(prefix="/api")
    verify_api_key = create_api_key_dependency(settings)

    @router.get("/status")
    async def get_status() -> dict[str, Any]:
        """Return a health snapshot."""
        return {
            "status": "online",
            "timestamp": utc_now_iso(),
            "totalRecords": await inventory_storage.count(),
            "version": API_VERSION,
        }

    @router.post("/inventory", dependencies=[Depends(verify_api_key)])
    async def post_inventory(request: Request) -> JSONResponse:
        """Ingest a single record (add_inventory) or a batch (sync_inventory)."""
        if not _is_json_request(request):
            return _invalid_format()
        try:
            body = _load_json_body(await request.body())
        except ValueError:
            return _invalid_format()

        try:
            command = parse_ingest_payload(body)
        except InvalidPayloadError as exc:
            logger.debug("Rejected ingest payload: %s", exc)
            return _invalid_format()

        try:
            received_at = utc_now_iso()
            records = [
                stamp_record(data, received_at, command.source)
                for data in command.records
            ]
            if command.is_bulk:
                added = await inventory_storage.extend(records)
                logger.info("Bulk sync: %d records received", added)
                return JSONResponse(
                    status_code=200,
                    content={
                        "success": True,
                        "message": "Bulk sync completed",
                        "recordsAdded": added,
                        "totalRecords": await inventory_storage.count(),
                    },
                )

            record_id = await inventory_storage.append(records[0])
            logger.info(
                "New inventory record received: %s", records[0].get("productBarcode")
            )
            return JSONResponse(
                status_code=201,
                content={
                    "success": True,
                    "message": "Inventory record added",
                    "recordId": record_id,
                    "totalRecords": await inventory_storage.count(),
                },
            )
        except Exception:
            logger.exception("Error processing inventory data")
            return JSONResponse(
                status_code=500,
                content={"success": False, "error": "Internal server error"},
            )

    @router.get("/inventory", dependencies=[Depends(verify_api_key)])
    async def get_inventory(
        site: str | None = Query(default=None),
        floor: str | None = Query(default=None),
        room: str | None = Query(default=None),
        shelf: str | None = Query(default=None),
        product: str | None = Query(default=None),
        limit: str | None = Query(default=None),
    ) -> dict[str, Any]:
        """List records, optionally filtered and trimmed to the newest N.

        Args:
            site, floor, room, shelf, product: Exact-match filters.
            limit: Keep only the trailing N records after filtering.
        """
        records = [r async for r in inventory_storage.read()]
        criteria = _parse_filter_params(site, floor, room, shelf, product)
        matches = filter_records(records, criteria)
        filtered = take_last(matches, _parse_limit_param(limit))
        return {
            "success": True,
            "totalRecords": len(records),
            "filteredRecords": len(filtered),
            "data": filtered,
        }

    @router.delete("/inventory", dependencies=[Depends(verify_api_key)])
    async def delete_inventory() -> dict[str, Any]:
        """Clear every stored record. The request log is left alone."""
        removed = await inventory_storage.clear()
        logger.info("All inventory data cleared (%d records)", removed)
        return {
            "success": True,
            "message": f"{removed} records deleted",
            "totalRecords": 0,
        }

    @router.get("/stats")
    async def get_stats() -> dict[str, Any]:
        """Return aggregate statistics over the whole store."""
        records = [r async for r in inventory_storage.read()]
        return stats_to_dict(compute_stats(records))

    @router.get("/logs")
    async def get_logs(limit: str | None = Query(default=None)) -> dict[str, Any]:
        """Return the most recent request log entries.

        Args:
            limit: Number of trailing entries to return (default 50).
        """
        entries = [
            e async for e in log_storage.read(limit=_parse_log_limit_param(limit))
        ]
        return {
            "logs": [log_entry_to_dict(e) for e in entries],
            "totalLogs": await log_storage.count(),
        }

    @router.get("/export/csv")
    async def export_csv() -> Response:
        """Download the full store as CSV."""
        records = [r async for r in inventory_storage.read()]
        body = encode_csv(records, escape=settings.csv_escape_quotes)
        return _attachment(body, "text/csv", "csv")

    @router.get("/export/json")
    async def export_json() -> Response:
        """Download the full store as a JSON array."""
        records = [r async for r in inventory_storage.read()]
        return _attachment(encode_records(records), "application/json", "json")

    return router
