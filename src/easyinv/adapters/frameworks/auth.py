"""API-key gate for the inventory endpoints.

The gate is a FastAPI dependency. Enforcement is off unless
Settings.require_api_key is set, in which case a missing or wrong key is
rejected with 401.
"""

import logging
from collections.abc import Callable, Coroutine
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from easyinv.config import Settings

logger = logging.getLogger(__name__)


class InvalidApiKeyError(Exception):
    """Raised by the gate when enforcement is on and the key does not match."""


def _extract_api_key(headers: Any) -> str | None:
    """Extract the client key from request headers.

    Looks at `Authorization` first, with the first "Bearer " removed, and
    falls back to `x-api-key` when nothing is left after stripping.

    Args:
        headers: A case-insensitive header mapping (Starlette Headers).

    Returns:
        The key string, or None when neither header carries one.
    """
    token = (headers.get("authorization") or "").replace("Bearer ", "", 1)
    return token or headers.get("x-api-key") or None


def create_api_key_dependency(
    settings: Settings,
) -> Callable[[Request], Coroutine[Any, Any, str | None]]:
    """Create the API-key dependency for the given settings.

    Args:
        settings: Runtime settings carrying the expected key and the
            enforcement switch.

    Returns:
        Async dependency returning the presented key (or None).
    """

    async def verify_api_key(request: Request) -> str | None:
        api_key = _extract_api_key(request.headers)
        if settings.require_api_key and api_key != settings.api_key:
            raise InvalidApiKeyError(f"{request.method} {request.url.path}")
        return api_key

    return verify_api_key


async def invalid_api_key_handler(
    request: Request, exc: InvalidApiKeyError
) -> JSONResponse:
    """Turn a rejected key into a 401 JSON response."""
    logger.warning("Rejected %s: invalid API key", exc)
    return JSONResponse(status_code=401, content={"error": "Invalid API key"})
