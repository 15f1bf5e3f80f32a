"""ASGI request logging middleware.

Framework-agnostic: it wraps any ASGI application, so it works the same in
front of FastAPI or a bare ASGI callable.
"""

import logging
from collections.abc import Callable, Coroutine
from typing import Any

from easyinv.core.logs import request_entry
from easyinv.core.ports import RequestLogStoragePort

logger = logging.getLogger(__name__)

# ASGI type aliases
Scope = dict[str, Any]
Receive = Callable[[], Coroutine[Any, Any, dict[str, Any]]]
Send = Callable[[dict[str, Any]], Coroutine[Any, Any, None]]
ASGIApp = Callable[[Scope, Receive, Send], Coroutine[Any, Any, None]]


def _extract_header(scope: Scope, header_name: str) -> str | None:
    """Return a header value from ASGI scope headers (case-insensitive).

    Args:
        scope: ASGI scope dictionary containing request metadata.
        header_name: Name of the header to search for.

    Returns:
        The first matching header value, or None when absent.
    """
    header_bytes = header_name.lower().encode()
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    for name, value in headers:
        if name.lower() == header_bytes:
            return value.decode("latin-1")
    return None


def _client_address(scope: Scope) -> str | None:
    """Return the client host from the ASGI scope, if the server reports one."""
    client = scope.get("client")
    if not client:
        return None
    return str(client[0])


class RequestLogMiddleware:
    """ASGI middleware that records every HTTP request in the request log.

    The entry is written before the wrapped app runs, so a handler that
    reads the log already sees its own request. The middleware never blocks
    or rejects a request.
    """

    def __init__(self, app: ASGIApp, log_storage: RequestLogStoragePort) -> None:
        """Initialize the middleware with a wrapped app and log storage.

        Args:
            app: The ASGI application to wrap.
            log_storage: Storage adapter for request log entries.
        """
        self.app = app
        self.log_storage = log_storage

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI callable interface that logs, then forwards to the wrapped app."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        entry = request_entry(
            method=scope["method"],
            path=scope["path"],
            ip=_client_address(scope),
            user_agent=_extract_header(scope, "user-agent"),
        )
        await self.log_storage.write(entry)
        logger.info("%s %s from %s", entry.method, entry.path, entry.ip)

        await self.app(scope, receive, send)
