"""BDD step definitions for the inventory workflow feature."""

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from pytest_bdd import given, parsers, then, when

from easyinv.adapters.storage.in_memory import (
    InMemoryInventoryStorage,
    InMemoryRequestLogStorage,
)
from easyinv.app import create_app
from easyinv.config import Settings


@dataclass
class InventoryScenarioContext:
    """State shared between the steps of one scenario."""

    inventory_storage: InMemoryInventoryStorage = field(
        default_factory=InMemoryInventoryStorage
    )
    log_storage: InMemoryRequestLogStorage = field(
        default_factory=InMemoryRequestLogStorage
    )
    app: Any = None
    response: httpx.Response | None = None


def run_async(coro: Coroutine[Any, Any, Any]) -> Any:
    """Run a coroutine to completion from a synchronous step."""
    return asyncio.run(coro)


def call_api(
    ctx: InventoryScenarioContext, method: str, path: str, **kwargs: Any
) -> httpx.Response:
    """Send one request to the scenario app and keep the response."""

    async def _request() -> httpx.Response:
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=ctx.app), base_url="http://test"
        ) as client:
            return await client.request(method, path, **kwargs)

    ctx.response = run_async(_request())
    return ctx.response


@pytest.fixture
def ctx() -> InventoryScenarioContext:
    """Fresh scenario context for each test."""
    return InventoryScenarioContext()


# === Background Steps ===
@given("an inventory API with an empty store")
def step_empty_api(ctx: InventoryScenarioContext) -> None:
    ctx.app = create_app(Settings(), ctx.inventory_storage, ctx.log_storage)


@given(parsers.parse('the store holds records at sites "{sites}"'))
def step_seed_sites(ctx: InventoryScenarioContext, sites: str) -> None:
    records = [
        {"site": site, "productBarcode": str(i), "quantity": 1}
        for i, site in enumerate(sites.split(","))
    ]
    run_async(ctx.inventory_storage.extend(records))


# === Ingestion Steps ===
@when(
    parsers.parse(
        'the scanner adds a record with barcode "{barcode}" at site "{site}"'
        " and quantity {quantity:d}"
    )
)
def step_add_record(
    ctx: InventoryScenarioContext, barcode: str, site: str, quantity: int
) -> None:
    call_api(
        ctx,
        "POST",
        "/api/inventory",
        json={
            "action": "add_inventory",
            "data": {"productBarcode": barcode, "site": site, "quantity": quantity},
        },
    )


@when(parsers.parse('the scanner syncs {n:d} records at site "{site}"'))
def step_sync_records(ctx: InventoryScenarioContext, n: int, site: str) -> None:
    data = [{"productBarcode": f"P{i}", "site": site} for i in range(n)]
    call_api(
        ctx, "POST", "/api/inventory", json={"action": "sync_inventory", "data": data}
    )


@when(parsers.parse('the scanner sends the action "{action}"'))
def step_send_action(ctx: InventoryScenarioContext, action: str) -> None:
    call_api(ctx, "POST", "/api/inventory", json={"action": action, "data": {}})


# === Operator Steps ===
@when(parsers.parse('the operator queries site "{site}" with limit {limit:d}'))
def step_query(ctx: InventoryScenarioContext, site: str, limit: int) -> None:
    call_api(ctx, "GET", "/api/inventory", params={"site": site, "limit": str(limit)})


@when("the operator clears the store")
def step_clear(ctx: InventoryScenarioContext) -> None:
    call_api(ctx, "DELETE", "/api/inventory")


# === Assertions ===
@then(parsers.parse("the response status is {code:d}"))
def step_status(ctx: InventoryScenarioContext, code: int) -> None:
    assert ctx.response is not None
    assert ctx.response.status_code == code


@then(
    parsers.parse(
        "the response reports record id {record_id:d} and {total:d} total records"
    )
)
def step_record_id(ctx: InventoryScenarioContext, record_id: int, total: int) -> None:
    body = ctx.response.json()
    assert body["recordId"] == record_id
    assert body["totalRecords"] == total


@then(parsers.parse("the response reports {n:d} records added"))
def step_records_added(ctx: InventoryScenarioContext, n: int) -> None:
    assert ctx.response.json()["recordsAdded"] == n


@then(parsers.parse('the response reports "{message}"'))
def step_message(ctx: InventoryScenarioContext, message: str) -> None:
    assert ctx.response.json()["message"] == message


@then(parsers.parse("the store holds {n:d} records"))
def step_store_size(ctx: InventoryScenarioContext, n: int) -> None:
    assert run_async(ctx.inventory_storage.count()) == n


@then(
    parsers.parse(
        "the stats report {total:d} total products and {unique:d} unique products"
    )
)
def step_stats_totals(ctx: InventoryScenarioContext, total: int, unique: int) -> None:
    stats = call_api(ctx, "GET", "/api/stats").json()
    assert stats["totalProducts"] == total
    assert stats["uniqueProducts"] == unique


@then(parsers.parse('the stats list sites "{sites}"'))
def step_stats_sites(ctx: InventoryScenarioContext, sites: str) -> None:
    stats = call_api(ctx, "GET", "/api/stats").json()
    assert stats["sites"] == sites.split(",")


@then(parsers.parse("{count:d} records are returned out of {total:d} total"))
def step_query_counts(ctx: InventoryScenarioContext, count: int, total: int) -> None:
    body = ctx.response.json()
    assert body["filteredRecords"] == count
    assert len(body["data"]) == count
    assert body["totalRecords"] == total


@then("the CSV export has only the header row")
def step_csv_header_only(ctx: InventoryScenarioContext) -> None:
    text = call_api(ctx, "GET", "/api/export/csv").text
    assert text.split("\n") == [
        "Timestamp,Site,Floor,Room,Shelf,Product_Barcode,Quantity,Received_At"
    ]
