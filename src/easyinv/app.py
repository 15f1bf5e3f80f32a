"""Application factory and entry point for the inventory API.

Run with:
    easyinv
    python -m easyinv
    uvicorn easyinv.app:create_app --factory --port 8010

Endpoints:
    GET    /api/status        - health check
    POST   /api/inventory     - receive inventory data (single or bulk)
    GET    /api/inventory     - list/filter inventory data
    DELETE /api/inventory     - clear all data
    GET    /api/stats         - statistics
    GET    /api/logs          - request log
    GET    /api/export/csv    - export as CSV
    GET    /api/export/json   - export as JSON
    GET    /                  - web interface
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from easyinv.adapters.frameworks.asgi import RequestLogMiddleware
from easyinv.adapters.frameworks.auth import (
    InvalidApiKeyError,
    invalid_api_key_handler,
)
from easyinv.adapters.frameworks.fastapi import API_VERSION, create_inventory_router
from easyinv.adapters.logging import configure_logging
from easyinv.adapters.storage.in_memory import (
    InMemoryInventoryStorage,
    InMemoryRequestLogStorage,
)
from easyinv.config import Settings, load_settings
from easyinv.core.ports import InventoryStoragePort, RequestLogStoragePort

logger = logging.getLogger(__name__)

ENDPOINTS = [
    ("POST", "/api/inventory", "Receive inventory data"),
    ("GET", "/api/inventory", "Get all inventory data"),
    ("GET", "/api/stats", "Get statistics"),
    ("GET", "/api/status", "Health check"),
    ("GET", "/api/logs", "Connection logs"),
    ("DELETE", "/api/inventory", "Clear all data"),
    ("GET", "/api/export/csv", "Export as CSV"),
    ("GET", "/api/export/json", "Export as JSON"),
]


def create_app(
    settings: Settings | None = None,
    inventory_storage: InventoryStoragePort | None = None,
    log_storage: RequestLogStoragePort | None = None,
) -> FastAPI:
    """Build the FastAPI application with its stores, middleware and routes.

    Args:
        settings: Runtime settings. Loaded from the environment when omitted.
        inventory_storage: Record store. A fresh in-memory store when omitted.
        log_storage: Request log store. A fresh in-memory store when omitted.

    Returns:
        Configured FastAPI application. The stores are also reachable as
        app.state.inventory_storage and app.state.log_storage.
    """
    if settings is None:
        settings = load_settings()
    if inventory_storage is None:
        inventory_storage = InMemoryInventoryStorage()
    if log_storage is None:
        log_storage = InMemoryRequestLogStorage()

    app = FastAPI(title="EasyInv API", version=API_VERSION)
    app.state.settings = settings
    app.state.inventory_storage = inventory_storage
    app.state.log_storage = log_storage

    app.add_exception_handler(InvalidApiKeyError, invalid_api_key_handler)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it is outermost and sees every request.
    app.add_middleware(RequestLogMiddleware, log_storage=log_storage)

    router = create_inventory_router(inventory_storage, log_storage, settings)
    app.include_router(router)

    if settings.static_dir.is_dir():
        app.mount(
            "/",
            StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )
    else:
        logger.warning(
            "Static directory %s not found; web UI disabled", settings.static_dir
        )

    return app


def _log_startup(settings: Settings) -> None:
    base_url = f"http://localhost:{settings.port}"
    logger.info("EasyInv API server listening on %s:%d", settings.host, settings.port)
    logger.info("API endpoint: %s/api/inventory", base_url)
    logger.info("Web interface: %s", base_url)
    logger.info("Statistics: %s/api/stats", base_url)
    logger.info(
        "API key enforcement: %s", "on" if settings.require_api_key else "off"
    )
    for method, path, description in ENDPOINTS:
        logger.info("  %-6s %-18s - %s", method, path, description)


def main() -> None:
    """Load settings, configure logging and serve the API with uvicorn."""
    settings = load_settings()
    configure_logging(settings.log_level)
    _log_startup(settings)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
