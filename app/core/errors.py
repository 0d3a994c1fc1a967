"""API error responses and exception handler registration."""

from __future__ import annotations

from typing import Any
import logging

from fastapi import FastAPI
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import factory
from app.errors.wrapper import wrap
from app.schemas.error import WireError

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Raised by route code to answer with a specific wire error."""

    def __init__(self, error: WireError) -> None:
        super().__init__(error.message)
        self.error = error


def render_error(error: WireError) -> JSONResponse:
    """Render a wire error, exposing any retry hint as a Retry-After header."""
    headers = None
    if error.retry_after is not None:
        headers = {"Retry-After": str(error.retry_after)}
    return JSONResponse(status_code=error.code, content=error.to_payload(), headers=headers)


def _validation_error(exc: RequestValidationError) -> WireError:
    issues = exc.errors()
    if not issues:
        return factory.invalid_request_parameter()

    issue = issues[0]
    if issue.get("type") == "json_invalid":
        return factory.invalid_request_body()

    param = _format_location(issue.get("loc", ()))
    if issue.get("type") == "missing":
        return factory.missing_request_parameter(param)
    return factory.invalid_request_parameter(param)


def _format_location(location: tuple[Any, ...] | list[Any] | Any) -> str | None:
    if not isinstance(location, (tuple, list)):
        return str(location)

    prefixes = {"body", "query", "path", "header", "cookie"}
    filtered = [str(part) for part in location if part not in prefixes]
    if filtered:
        return ".".join(filtered)
    return None


async def request_validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as parameter or body errors."""

    return render_error(_validation_error(exc))


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Normalize transport and auth-library HTTP errors."""

    message = exc.detail if isinstance(exc.detail, str) else None
    return render_error(wrap({"code": exc.status_code, "message": message}))


async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
    """Return explicit domain errors as raised."""

    return render_error(exc.error)


async def unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    """Answer unexpected failures with the generic error response."""

    logger.exception("Unhandled exception while serving request")
    return render_error(wrap(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to a FastAPI app instance."""

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
