from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from fastapi import Request
from fastapi.responses import Response

from core.config import settings

if TYPE_CHECKING:  # pragma: no cover
    from fastapi import FastAPI

BASE_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-site",
}

HSTS_VALUE = "max-age=31536000; includeSubDomains"

# Post payloads are JSON or plain text and never load sub-resources
API_CSP = "default-src 'none'; frame-ancestors 'none'"

# Swagger UI and ReDoc pull their assets from a CDN
DOCS_PATHS = ("/docs", "/redoc", "/openapi.json")


def security_headers_for(path: str, environment: str) -> dict[str, str]:
    """Return the headers added to a response for ``path``."""
    headers = dict(BASE_HEADERS)
    if environment != "development":
        headers["Strict-Transport-Security"] = HSTS_VALUE
    if not path.startswith(DOCS_PATHS):
        headers["Content-Security-Policy"] = API_CSP
    return headers


def register_security_headers_middleware(app: FastAPI) -> None:
    """Attach middleware that hardens every response without overriding route-set headers."""

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:  # noqa: D401
        response = await call_next(request)
        for name, value in security_headers_for(request.url.path, settings.environment).items():
            response.headers.setdefault(name, value)
        return response
