"""API Key Gate: rejects requests without the configured key before routing.

Invariants:
    - Runs for every path except the documentation prefixes
    - Rejection is 401 with a plaintext body; the route is never invoked
    - The key value is never logged

Design Decisions:
    - Starlette middleware over a route dependency: unknown paths are gated too
    - Decision logic delegated to core/enforce_api_key.py
"""

import logging
from collections.abc import Sequence

from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from user_api.core.enforce_api_key import check_api_key, is_exempt_path

logger = logging.getLogger(__name__)


class ApiKeyGateMiddleware(BaseHTTPMiddleware):
    """Compare the API key header against the configured secret."""

    def __init__(
        self,
        app: ASGIApp,
        api_key: str,
        header_name: str = "X-Api-Key",
        exempt_paths: Sequence[str] = ("/swagger",),
    ):
        super().__init__(app)
        self._api_key = api_key
        self._header_name = header_name
        self._exempt_paths = tuple(exempt_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ):
        if is_exempt_path(request.url.path, self._exempt_paths):
            return await call_next(request)
        rejection = check_api_key(
            request.headers.get(self._header_name), self._api_key,
        )
        if rejection is not None:
            logger.warning(
                f"Request rejected: {rejection}",
                extra={"path": request.url.path, "method": request.method},
            )
            return PlainTextResponse(
                rejection, status_code=status.HTTP_401_UNAUTHORIZED,
            )
        return await call_next(request)
