from __future__ import annotations

import logging
import math

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blogsum.core.errors import AppError, RateLimitError
from blogsum.core.logging import log_context

logger = logging.getLogger(__name__)


def error_response(exc: AppError) -> JSONResponse:
    """Render an AppError as the public `{error, code, retryAfter?}` body."""
    content: dict[str, object] = {"error": exc.detail, "code": exc.code}
    headers: dict[str, str] = {}
    retry_after = getattr(exc, "retry_after", None)
    if isinstance(exc, RateLimitError) and retry_after is not None:
        content["retryAfter"] = retry_after
        headers["Retry-After"] = str(math.ceil(retry_after))
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers or None)


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    request.state.error_code = exc.code
    request.state.error_status_code = exc.status_code
    # Client errors are logged where they are raised.
    if exc.status_code >= 500:
        with log_context(request_id=request_id, method=request.method, path=request.url.path):
            logger.error(
                "%s",
                exc.detail,
                extra={
                    "error_code": exc.code,
                    "status_code": exc.status_code,
                    "error_type": type(exc).__name__,
                },
            )
    return error_response(exc)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    request.state.error_code = "invalid_request"
    request.state.error_status_code = 400
    fields = [".".join(str(part) for part in error.get("loc", ())) for error in exc.errors()]
    with log_context(request_id=request_id, method=request.method, path=request.url.path):
        logger.warning(
            "Invalid request",
            extra={"error_code": "invalid_request", "status_code": 400, "fields": ",".join(fields)},
        )
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request. Please check your URL.", "code": "invalid_request"},
    )
