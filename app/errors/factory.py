"""Constructors for every known error kind.

Each constructor builds its payload from the catalog and passes it through
``wrap``, so responses built here and responses normalized from raw errors
share one shape.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from typing import Any
import time

from app.errors import catalog
from app.errors.classifier import Classification
from app.errors.wrapper import wrap
from app.schemas.error import WireError


def _payload(errno: int, **fields: Any) -> dict[str, Any]:
    definition = catalog.CATALOG[errno]
    payload: dict[str, Any] = {
        "code": definition.status,
        "errno": definition.errno,
        "message": definition.message,
    }
    payload.update(fields)
    return payload


def _with_param(errno: int, param: str | None) -> WireError:
    message = catalog.CATALOG[errno].message
    if param:
        message = f"{message}: {param}"
    return wrap(_payload(errno, message=message, param=param))


def account_exists(email: str | None = None) -> WireError:
    """Build a 101 error for a sign-up with an email already registered."""
    return wrap(_payload(catalog.ACCOUNT_EXISTS, email=email))


def unknown_account(email: str | None = None) -> WireError:
    """Build a 102 error for an email with no account."""
    return wrap(_payload(catalog.UNKNOWN_ACCOUNT, email=email))


def incorrect_password(email: str | None = None) -> WireError:
    """Build a 103 error for a failed password check."""
    return wrap(_payload(catalog.INCORRECT_PASSWORD, email=email))


def unverified_account() -> WireError:
    """Build a 104 error for an account whose email is not verified yet."""
    return wrap(_payload(catalog.UNVERIFIED_ACCOUNT))


def invalid_verification_code(details: Mapping[str, Any] | None = None) -> WireError:
    """Build a 105 error; ``details`` are merged over the defaults."""
    return wrap(_payload(catalog.INVALID_VERIFICATION_CODE, **dict(details or {})))


def invalid_request_body() -> WireError:
    """Build a 106 error for a body that is not valid JSON."""
    return wrap(_payload(catalog.INVALID_REQUEST_BODY))


def invalid_request_parameter(param: str | None = None) -> WireError:
    """Build a 107 error naming the rejected parameter."""
    return _with_param(catalog.INVALID_REQUEST_PARAMETER, param)


def missing_request_parameter(param: str | None = None) -> WireError:
    """Build a 108 error naming the absent parameter."""
    return _with_param(catalog.MISSING_REQUEST_PARAMETER, param)


def invalid_signature(message: str | None = None) -> WireError:
    """Build a 109 error, keeping the auth library's message when it has one."""
    payload = _payload(catalog.INVALID_SIGNATURE)
    if message:
        payload["message"] = message
    return wrap(payload)


def invalid_token() -> WireError:
    """Build a 110 error for unknown or invalid credentials."""
    return wrap(_payload(catalog.INVALID_TOKEN))


def invalid_timestamp() -> WireError:
    """Build a 111 error carrying the server clock so clients can correct skew."""
    return wrap(_payload(catalog.INVALID_TIMESTAMP, serverTime=int(time.time())))


def missing_content_length() -> WireError:
    """Build a 112 error."""
    return wrap(_payload(catalog.MISSING_CONTENT_LENGTH))


def request_body_too_large() -> WireError:
    """Build a 113 error."""
    return wrap(_payload(catalog.REQUEST_BODY_TOO_LARGE))


def too_many_requests() -> WireError:
    """Build a 114 error with a retry hint."""
    return wrap(_payload(catalog.TOO_MANY_REQUESTS, retryAfter=catalog.RETRY_AFTER_SECONDS))


def invalid_nonce() -> WireError:
    """Build a 115 error for a replayed request nonce."""
    return wrap(_payload(catalog.INVALID_NONCE))


def service_unavailable() -> WireError:
    """Build a 201 error with a retry hint."""
    return wrap(_payload(catalog.SERVICE_UNAVAILABLE, retryAfter=catalog.RETRY_AFTER_SECONDS))


def unspecified_error(message: str | None = None) -> WireError:
    """Build a 999 error through the unclassified path, which logs it."""
    return wrap({"message": message})


_CLASSIFIED: dict[int, Callable[[Classification], WireError]] = {
    catalog.INVALID_SIGNATURE: lambda found: invalid_signature(found.message),
    catalog.INVALID_TOKEN: lambda _: invalid_token(),
    catalog.INVALID_TIMESTAMP: lambda _: invalid_timestamp(),
    catalog.INVALID_NONCE: lambda _: invalid_nonce(),
    catalog.REQUEST_BODY_TOO_LARGE: lambda _: request_body_too_large(),
}


def from_classification(classification: Classification) -> WireError:
    """Build the canonical error for a classifier result."""
    return _CLASSIFIED[classification.errno](classification)
