"""
scrapco_admin.api.errors

Exception handlers producing the `{success: false, error}` envelope.

Responsibilities:
- Translate the service error taxonomy into HTTP responses.
- Keep framework-raised errors (unknown routes, malformed bodies) in the same shape.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from scrapco_admin.errors import AdminApiError
from scrapco_admin.observability.logging import get_logger

log = get_logger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"success": False, "error": message}, status_code=status_code)


async def _admin_api_error(_: Request, exc: AdminApiError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("admin_request_failed", error_type=type(exc).__name__, error=exc.message)
    return error_response(exc.status_code, exc.message)


async def _http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def _body_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    log.info("request_body_rejected", errors=len(exc.errors()))
    return error_response(HTTP_400_BAD_REQUEST, "Invalid request body")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AdminApiError, _admin_api_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _body_error)  # type: ignore[arg-type]
