"""Heuristics that infer an errno for errors raised without one.

The request-signing auth library reports credential and signature failures as
plain 401 errors, and the HTTP layer reports oversized bodies as plain 400
errors. Both are recognized here by their message text.
"""

from __future__ import annotations

import re
from typing import Any
from typing import NamedTuple

from app.errors import catalog

TOO_LARGE = re.compile(r"^Payload (?:content length|size) greater than maximum allowed")

_UNAUTHORIZED_MESSAGES: dict[str, int] = {
    "Unknown credentials": catalog.INVALID_TOKEN,
    "Invalid credentials": catalog.INVALID_TOKEN,
    "Stale timestamp": catalog.INVALID_TIMESTAMP,
    "Invalid nonce": catalog.INVALID_NONCE,
}


class Classification(NamedTuple):
    """Errno inferred for a raw error, with the message to carry over if any."""

    errno: int
    message: str | None = None


def classify(code: Any, message: Any) -> Classification | None:
    """Infer a canonical errno from an HTTP status and message, or return ``None``."""
    if not _is_status(code):
        return None

    text = message if isinstance(message, str) else None

    if code == 401:
        errno = _UNAUTHORIZED_MESSAGES.get(text) if text is not None else None
        if errno is not None:
            return Classification(errno)
        return Classification(catalog.INVALID_SIGNATURE, text)

    if code == 400 and text is not None and TOO_LARGE.match(text):
        return Classification(catalog.REQUEST_BODY_TOO_LARGE)

    return None


def _is_status(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
