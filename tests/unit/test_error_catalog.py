"""Unit tests for the canonical error catalog."""

from __future__ import annotations

import pytest

from app.errors import catalog


def test_catalog_lists_every_public_errno_with_its_status() -> None:
    statuses = {errno: definition.status for errno, definition in catalog.CATALOG.items()}

    assert statuses == {
        101: 400,
        102: 400,
        103: 400,
        104: 400,
        105: 400,
        106: 400,
        107: 400,
        108: 400,
        109: 401,
        110: 401,
        111: 401,
        112: 411,
        113: 413,
        114: 429,
        115: 401,
        201: 503,
        999: 400,
    }


def test_catalog_entries_are_keyed_by_their_own_errno() -> None:
    for errno, definition in catalog.CATALOG.items():
        assert definition.errno == errno
        assert definition.message


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        catalog.CATALOG[500] = catalog.CanonicalDefinition(500, 500, "Nope")  # type: ignore[index]


def test_unspecified_entry_carries_default_message() -> None:
    definition = catalog.get_definition(catalog.UNSPECIFIED)

    assert definition is not None
    assert definition.message == "Unspecified error"
    assert definition.status == 400


def test_get_definition_returns_none_for_unknown_errno() -> None:
    assert catalog.get_definition(None) is None
    assert catalog.get_definition(404) is None


@pytest.mark.parametrize(
    ("errno", "expected"),
    [
        (catalog.INVALID_SIGNATURE, 401),
        (catalog.INVALID_TOKEN, 401),
        (catalog.INVALID_TIMESTAMP, 401),
        (catalog.INVALID_NONCE, 401),
        (catalog.MISSING_CONTENT_LENGTH, 411),
        (catalog.TOO_MANY_REQUESTS, 429),
        (catalog.SERVICE_UNAVAILABLE, 503),
        (catalog.ACCOUNT_EXISTS, 400),
        (12345, 400),
        (None, 400),
    ],
)
def test_default_status_follows_catalog_with_generic_fallback(errno: int | None, expected: int) -> None:
    assert catalog.default_status(errno) == expected
