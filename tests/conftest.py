"""Shared test fixtures for all test modules."""

from collections.abc import AsyncGenerator
from pathlib import Path

import httpx
import pytest

from easyinv.adapters.storage.in_memory import (
    InMemoryInventoryStorage,
    InMemoryRequestLogStorage,
)
from easyinv.app import create_app
from easyinv.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Default settings: key gate off, legacy CSV output, bundled web root."""
    return Settings()


@pytest.fixture
def inventory_storage() -> InMemoryInventoryStorage:
    """Fixture providing an empty inventory store."""
    return InMemoryInventoryStorage()


@pytest.fixture
def log_storage() -> InMemoryRequestLogStorage:
    """Fixture providing an empty request log."""
    return InMemoryRequestLogStorage()


# === ASGI Test Fixtures ===


@pytest.fixture
def asgi_scope():
    """Factory fixture for creating ASGI scope dicts."""
    from easyinv.adapters.frameworks.asgi import Scope

    def _scope(
        method: str = "GET",
        path: str = "/test",
        headers: list[tuple[bytes, bytes]] | None = None,
        client: tuple[str, int] | None = ("10.0.0.5", 51234),
    ) -> Scope:
        return {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": headers or [],
            "client": client,
        }

    return _scope


@pytest.fixture
def asgi_send_capture():
    """Fixture that returns a send callable and a responses list for capture."""
    responses: list[dict[str, object]] = []

    async def send(message: dict[str, object]) -> None:
        responses.append(message)

    return send, responses


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            app = create_app(settings)
            async with asgi_test_client(app) as client:
                response = await client.get("/api/status")
    """

    def _get_client(app):
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client


@pytest.fixture
async def api_client(
    settings: Settings,
    inventory_storage: InMemoryInventoryStorage,
    log_storage: InMemoryRequestLogStorage,
    asgi_test_client,
) -> AsyncGenerator:
    """Client bound to a fresh app, plus its stores.

    Returns a tuple of (client, inventory_storage, log_storage).
    """
    app = create_app(settings, inventory_storage, log_storage)
    async with asgi_test_client(app) as client:
        yield client, inventory_storage, log_storage


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """A throwaway web root with an index page and one asset."""
    (tmp_path / "index.html").write_text("<h1>Inventory dashboard</h1>")
    (tmp_path / "app.js").write_text("console.log('ok');")
    return tmp_path
