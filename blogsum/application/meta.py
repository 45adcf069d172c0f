from __future__ import annotations

import logging
import time

from blogsum import __version__
from blogsum.core.config import Settings
from blogsum.core.constants import API_VERSION
from blogsum.core.errors import NotReadyError
from blogsum.schemas.meta import HealthResponse, ReadyResponse, StatusResponse

_START_TIME = time.monotonic()

logger = logging.getLogger(__name__)


async def health_status() -> HealthResponse:
    return HealthResponse()


async def readiness_status(settings: Settings) -> ReadyResponse:
    """Ready once a completion key and model are configured; no upstream call is made."""
    if not settings.gemini_api_key:
        logger.warning("readiness check failed: completion service not configured")
        raise NotReadyError("Completion service is not configured.")
    if not settings.completion_model:
        logger.warning("readiness check failed: no completion model")
        raise NotReadyError("Completion model is not configured.")
    return ReadyResponse(completion_model=settings.completion_model)


async def status_snapshot(settings: Settings) -> StatusResponse:
    uptime_seconds = round(time.monotonic() - _START_TIME, 2)
    logger.debug("status snapshot", extra={"uptime_seconds": uptime_seconds})
    return StatusResponse(
        version=__version__,
        api_version=API_VERSION,
        environment=settings.app_env,
        max_content_chars=settings.max_content_chars,
        uptime_seconds=uptime_seconds,
    )
