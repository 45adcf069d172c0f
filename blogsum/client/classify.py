from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import httpx

from blogsum.client.errors import ClientError, ErrorType, StructuredError, create_error


def map_api_error(status: int, data: Mapping[str, Any]) -> StructuredError:
    """Turn a non-2xx response from the summarize endpoint into a structured error."""
    server_message = data.get("error") if isinstance(data.get("error"), str) else None
    details: dict[str, Any] = {"status": status}
    if isinstance(data.get("code"), str):
        details["code"] = data["code"]

    if status == 400:
        return create_error(ErrorType.VALIDATION, server_message or "Invalid request. Please check your URL.", details)
    if status in (403, 404):
        return create_error(ErrorType.CONTENT_NOT_FOUND, "Blog post not found or unable to access content.", details)
    if status == 429:
        details["retryAfter"] = data.get("retryAfter")
        return create_error(ErrorType.RATE_LIMIT, "Too many requests. Please wait a moment and try again.", details)
    if status in (500, 502):
        return create_error(ErrorType.SERVER, "Server error. Please try again later.", details)
    if status == 503:
        return create_error(ErrorType.SERVER, "Service temporarily unavailable. Please try again later.", details)
    return create_error(ErrorType.UNKNOWN, server_message or f"Unexpected error ({status})", details)


def _is_timeout(exc: BaseException) -> bool:
    return isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException))


def _is_transport_failure(exc: BaseException) -> bool:
    return isinstance(exc, (httpx.TransportError, ConnectionError))


def classify_error(exc: BaseException) -> StructuredError:
    """Timeouts first, then pre-classified errors, then transport failures."""
    if _is_timeout(exc):
        return create_error(
            ErrorType.TIMEOUT,
            "Request timed out. The blog might be too large or the server is busy.",
        )
    if isinstance(exc, ClientError):
        return exc.error
    if _is_transport_failure(exc):
        return create_error(
            ErrorType.NETWORK,
            "Network error. Please check your connection and try again.",
            {"originalError": str(exc)},
        )
    return create_error(
        ErrorType.UNKNOWN,
        "An unexpected error occurred. Please try again.",
        {"originalError": str(exc)},
    )


_NON_TRANSIENT = {ErrorType.VALIDATION, ErrorType.INVALID_URL, ErrorType.CONTENT_NOT_FOUND, ErrorType.TIMEOUT}


def is_transient(exc: BaseException) -> bool:
    """Whether another attempt at the same request could succeed."""
    return classify_error(exc).type not in _NON_TRANSIENT
