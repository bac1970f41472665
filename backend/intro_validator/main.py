"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
from time import monotonic

from fastapi import FastAPI

from intro_validator.config import get_settings
from intro_validator.logging_config import configure_logging
from intro_validator.routers import introductions, webhook
from intro_validator.services.introductions import get_validator

logger = logging.getLogger(__name__)

_STARTED_AT = monotonic()


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    # Fail fast on a broken taxonomy file or timezone.
    get_validator()
    logger.info("%s started (timezone=%s)", settings.app_name, settings.timezone)
    yield


app = FastAPI(title="Introduction Validator API", version="0.1.0", lifespan=lifespan)

app.include_router(introductions.router, tags=["introductions"])
app.include_router(webhook.router, tags=["webhook"])


@app.get("/health")
def health() -> dict[str, str]:
    """Simple health check endpoint."""

    return {"status": "ok"}


@app.get("/status")
def status() -> dict[str, object]:
    """Service status with uptime and the greeting expected right now."""

    now = datetime.now(timezone.utc)
    return {
        "status": "running",
        "service": get_settings().app_name,
        "uptime_seconds": round(monotonic() - _STARTED_AT, 3),
        "expected_greeting": get_validator().expected_greeting(now),
        "timestamp": now.isoformat(),
    }
