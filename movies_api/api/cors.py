"""
Cross-origin allow-list.

Requests from an origin outside the allow-list are still served; they simply
get no CORS headers, so the browser withholds the response from the page.
"""

import logging
from typing import Iterable, Optional

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST", "PATCH", "DELETE")
ALLOWED_HEADERS = ("Content-Type",)


class CorsGate:
    """Decides per request whether an origin may read the response."""

    def __init__(self, allowed_origins: Iterable[str]):
        self.allowed_origins = frozenset(allowed_origins)

    def is_allowed(self, origin: Optional[str]) -> bool:
        """True for a missing origin (same-origin or non-browser) or an allow-listed one."""
        return not origin or origin in self.allowed_origins

    def response_headers(self, origin: Optional[str], preflight: bool = False) -> dict[str, str]:
        """
        CORS headers to attach to a response.

        Args:
            origin: Value of the request's Origin header, if any
            preflight: Whether the request is an OPTIONS pre-flight

        Returns:
            Header map; empty when the origin is rejected
        """
        if not self.is_allowed(origin):
            logger.debug("Origin %s not in allow-list, omitting CORS headers", origin)
            return {}
        headers = {}
        if origin:
            # Echo the exact origin, never "*".
            headers["Access-Control-Allow-Origin"] = origin
            headers["Vary"] = "Origin"
        if preflight:
            headers["Access-Control-Allow-Methods"] = ",".join(ALLOWED_METHODS)
            headers["Access-Control-Allow-Headers"] = ",".join(ALLOWED_HEADERS)
        return headers


def install_cors_gate(app: FastAPI, gate: CorsGate) -> None:
    """Register an HTTP middleware applying ``gate`` to every response."""

    @app.middleware("http")
    async def cors_gate_middleware(request: Request, call_next):
        response = await call_next(request)
        headers = gate.response_headers(
            request.headers.get("origin"),
            preflight=request.method == "OPTIONS",
        )
        response.headers.update(headers)
        return response
