"""Wire error schema returned to clients."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic_core import to_jsonable_python


class WireError(BaseModel):
    """Canonical error response body.

    Kind-specific fields (``email``, ``param``, ``serverTime``, ``retryAfter``
    and anything copied from the raw error) are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    code: int
    errno: int
    error: str | None = None
    message: str
    info: str

    def to_payload(self) -> dict[str, Any]:
        """Return a JSON-safe dict with ``None`` fields omitted."""
        return to_jsonable_python(self.model_dump(exclude_none=True), fallback=str)

    @property
    def retry_after(self) -> int | None:
        """Retry hint in seconds, when the error carries one."""
        value = (self.model_extra or {}).get("retryAfter")
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None
