"""Normalize arbitrary raw errors into wire errors."""

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any
import logging

from app.core.config import get_error_settings
from app.errors import catalog
from app.errors.classifier import classify
from app.schemas.error import WireError

logger = logging.getLogger(__name__)

MIN_STATUS = 100
MAX_STATUS = 599


def wrap(raw: Any) -> WireError:
    """Turn any error-like value into a wire error.

    Mappings contribute their items and other objects their instance
    attributes. If the result carries no ``errno`` one is inferred from the
    status and message; when that fails the error is logged and reported as
    the generic 999. ``code`` defaults from the errno and is forced to 500 when
    it is not an HTTP status. This function does not raise.
    """
    info_url = get_error_settings().info_url
    error: dict[str, Any] = {"message": catalog.DEFAULT_MESSAGE, "info": info_url}
    error.update(_public_fields(raw))
    error["message"] = _read_message(raw) or catalog.DEFAULT_MESSAGE
    if not isinstance(error.get("info"), str) or not error["info"]:
        error["info"] = info_url
    error["errno"] = _as_int(error.get("errno"))
    has_code = error.get("code") is not None
    error["code"] = _as_status(error.get("code"))

    if error["errno"] is None:
        classification = classify(error["code"], error["message"])
        if classification is not None:
            from app.errors import factory

            error = factory.from_classification(classification).model_dump()

    if error["code"] is None:
        error["code"] = 500 if has_code else catalog.default_status(error["errno"])

    if error["errno"] is None:
        logger.error("unexpected error", extra={"op": "error.wrap", "err": dict(error)})
        error["errno"] = catalog.UNSPECIFIED

    if not isinstance(error.get("error"), str):
        error["error"] = _status_phrase(error["code"])

    return WireError.model_validate({key: value for key, value in error.items() if value is not None})


def _public_fields(raw: Any) -> dict[str, Any]:
    if raw is None:
        return {}
    try:
        items = raw.items() if isinstance(raw, Mapping) else vars(raw).items()
        return {key: value for key, value in items if isinstance(key, str) and not key.startswith("_")}
    except Exception:
        return {}


def _read_message(raw: Any) -> str | None:
    # Exceptions keep their message in args rather than in an attribute.
    try:
        if isinstance(raw, Mapping):
            value = raw.get("message")
        else:
            value = getattr(raw, "message", None)
            if value is None and isinstance(raw, BaseException):
                value = str(raw)
        if value is None or isinstance(value, str):
            return value
        return str(value)
    except Exception:
        return None


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_int(value: Any) -> int | None:
    if _is_int(value):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _as_status(value: Any) -> int | None:
    """Return ``value`` as an HTTP status, or ``None`` when it cannot be one."""
    status = _as_int(value)
    if status is None or not MIN_STATUS <= status <= MAX_STATUS:
        return None
    return status


def _status_phrase(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return "Unknown"
