"""Application configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_INFO_URL = "https://github.com/mozilla/fxa-auth-server/blob/master/docs/api.md#response-format"


@dataclass(frozen=True)
class ErrorSettings:
    """Runtime settings for wire error rendering."""

    info_url: str

    def safe_for_logging(self) -> dict[str, str]:
        """Return error settings safe for logs."""
        return {"info_url": self.info_url}


@lru_cache(maxsize=1)
def get_error_settings() -> ErrorSettings:
    """Load error settings from the environment."""
    return ErrorSettings(info_url=os.getenv("AUTH_ERRORS_INFO_URL") or DEFAULT_INFO_URL)
