"""FastAPI application entrypoint for the auth error boundary."""

import logging

from fastapi import FastAPI

from app.core.config import get_error_settings
from app.core.errors import register_error_handlers

logger = logging.getLogger(__name__)

settings = get_error_settings()
logger.info("Loaded error settings=%s", settings.safe_for_logging())

app = FastAPI(title="Auth Errors")
register_error_handlers(app)


@app.get("/health")
def health() -> dict[str, str]:
    """Health check stub endpoint for service readiness."""
    return {"status": "ok"}
