from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.exceptions import PostApiException, map_exception_to_http
from schemas.responses import ErrorResponse

if TYPE_CHECKING:  # pragma: no cover
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register application-wide exception handlers.

    Only domain exceptions that escape a route reach these handlers; routes
    that answer errors themselves never get here.
    """

    @app.exception_handler(PostApiException)
    async def post_api_exception_handler(request: Request, exc: PostApiException) -> JSONResponse:  # noqa: D401
        http_exc = map_exception_to_http(exc)
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        body = ErrorResponse(
            success=False,
            message=http_exc.detail,
            error={"type": exc.__class__.__name__, "code": exc.code},
        )
        return JSONResponse(status_code=http_exc.status_code, content=jsonable_encoder(body))
