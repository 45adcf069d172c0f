from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blogsum.core.config import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the effective configuration once the app starts serving."""
    settings: Settings = app.state.settings
    logger.info(
        "blogsum api starting",
        extra={
            "app_env": settings.app_env,
            "completion_model": settings.completion_model,
            "max_content_chars": settings.max_content_chars,
            "rate_limit": settings.rate_limit,
        },
    )
    try:
        yield
    finally:
        logger.info("blogsum api stopped")
