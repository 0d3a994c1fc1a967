"""Shared pytest fixtures for the auth error test suites."""

from collections.abc import Generator
from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def error_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Load error settings from a clean environment for every test."""
    from app.core.config import get_error_settings

    monkeypatch.delenv("AUTH_ERRORS_INFO_URL", raising=False)
    get_error_settings.cache_clear()
    yield
    get_error_settings.cache_clear()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Provide an API test client for contract suites."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
