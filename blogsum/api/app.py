from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from blogsum.api import __version__
from blogsum.api.routers import meta_router, summaries_router
from blogsum.core.config import Settings, get_settings
from blogsum.core.errors import AppError
from blogsum.core.handlers import handle_app_error, handle_validation_error
from blogsum.core.lifespan import lifespan
from blogsum.core.logging import setup_logging
from blogsum.core.middleware import ClientRateLimiter, log_requests


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Application factory for creating FastAPI instances.

    Args:
        settings: Optional settings override. If None, loads from environment
                  and fails fast when a required secret is missing.
    """
    if settings is None:
        settings = get_settings()

    middleware: list[Middleware] = []
    if settings.cors_allow_origins:
        middleware.append(
            Middleware(
                CORSMiddleware,
                allow_origins=settings.cors_allow_origins,
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            )
        )

    app = FastAPI(
        title="blogsum",
        description="Blog summaries in English and Urdu",
        version=__version__,
        middleware=middleware,
        lifespan=lifespan,
    )
    app.include_router(meta_router)
    app.include_router(summaries_router)
    app.state.settings = settings
    app.state.rate_limiter = ClientRateLimiter(settings.rate_limit)
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(BaseHTTPMiddleware, dispatch=log_requests)
    app.add_exception_handler(AppError, handle_app_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]

    return app


def build_default_app() -> FastAPI:
    """Entry point for `uvicorn --factory blogsum.api.app:build_default_app`."""
    setup_logging()
    return create_app()
