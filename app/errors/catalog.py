"""Catalog of known error kinds.

Every ``errno`` listed here is part of the public response contract. Existing
numbers are never reassigned; new kinds get new numbers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

ACCOUNT_EXISTS = 101
UNKNOWN_ACCOUNT = 102
INCORRECT_PASSWORD = 103
UNVERIFIED_ACCOUNT = 104
INVALID_VERIFICATION_CODE = 105
INVALID_REQUEST_BODY = 106
INVALID_REQUEST_PARAMETER = 107
MISSING_REQUEST_PARAMETER = 108
INVALID_SIGNATURE = 109
INVALID_TOKEN = 110
INVALID_TIMESTAMP = 111
MISSING_CONTENT_LENGTH = 112
REQUEST_BODY_TOO_LARGE = 113
TOO_MANY_REQUESTS = 114
INVALID_NONCE = 115
SERVICE_UNAVAILABLE = 201
UNSPECIFIED = 999

DEFAULT_MESSAGE = "Unspecified error"
DEFAULT_STATUS = 400
RETRY_AFTER_SECONDS = 30

# Signature-family errors answer 401 as a class.
SIGNATURE_ERRNOS = frozenset({INVALID_SIGNATURE, INVALID_TOKEN, INVALID_TIMESTAMP})


@dataclass(frozen=True)
class CanonicalDefinition:
    """Defaults for one known error kind."""

    errno: int
    status: int
    message: str


_DEFINITIONS = (
    CanonicalDefinition(ACCOUNT_EXISTS, 400, "Account already exists"),
    CanonicalDefinition(UNKNOWN_ACCOUNT, 400, "Unknown account"),
    CanonicalDefinition(INCORRECT_PASSWORD, 400, "Incorrect password"),
    CanonicalDefinition(UNVERIFIED_ACCOUNT, 400, "Unverified account"),
    CanonicalDefinition(INVALID_VERIFICATION_CODE, 400, "Invalid verification code"),
    CanonicalDefinition(INVALID_REQUEST_BODY, 400, "Invalid JSON in request body"),
    CanonicalDefinition(INVALID_REQUEST_PARAMETER, 400, "Invalid parameter in request body"),
    CanonicalDefinition(MISSING_REQUEST_PARAMETER, 400, "Missing parameter in request body"),
    CanonicalDefinition(INVALID_SIGNATURE, 401, "Invalid request signature"),
    CanonicalDefinition(INVALID_TOKEN, 401, "Invalid authentication token in request signature"),
    CanonicalDefinition(INVALID_TIMESTAMP, 401, "Invalid timestamp in request signature"),
    CanonicalDefinition(MISSING_CONTENT_LENGTH, 411, "Missing content-length header"),
    CanonicalDefinition(REQUEST_BODY_TOO_LARGE, 413, "Request body too large"),
    CanonicalDefinition(TOO_MANY_REQUESTS, 429, "Client has sent too many requests"),
    CanonicalDefinition(INVALID_NONCE, 401, "Invalid nonce in request signature"),
    CanonicalDefinition(SERVICE_UNAVAILABLE, 503, "Service unavailable"),
    CanonicalDefinition(UNSPECIFIED, DEFAULT_STATUS, DEFAULT_MESSAGE),
)

CATALOG: Mapping[int, CanonicalDefinition] = MappingProxyType({item.errno: item for item in _DEFINITIONS})


def get_definition(errno: int | None) -> CanonicalDefinition | None:
    """Return the catalog entry for an errno, if it is a known kind."""
    if errno is None:
        return None
    return CATALOG.get(errno)


def default_status(errno: int | None) -> int:
    """Return the HTTP status used when an error carries none of its own."""
    if errno in SIGNATURE_ERRNOS:
        return 401
    definition = get_definition(errno)
    if definition is not None:
        return definition.status
    return DEFAULT_STATUS
