import asyncio

import httpx
import pytest

from blogsum.client.classify import classify_error, is_transient, map_api_error
from blogsum.client.errors import ClientError, ErrorType, create_error
from blogsum.client.presentation import present


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (400, ErrorType.VALIDATION),
        (403, ErrorType.CONTENT_NOT_FOUND),
        (404, ErrorType.CONTENT_NOT_FOUND),
        (429, ErrorType.RATE_LIMIT),
        (500, ErrorType.SERVER),
        (502, ErrorType.SERVER),
        (503, ErrorType.SERVER),
        (418, ErrorType.UNKNOWN),
    ],
)
def test_map_api_error_by_status(status: int, expected: ErrorType) -> None:
    error = map_api_error(status, {})

    assert error.type is expected
    assert error.details is not None
    assert error.details["status"] == status
    assert error.recoverable


def test_map_api_error_uses_server_message_for_400() -> None:
    error = map_api_error(400, {"error": "URL must be http", "code": "invalid_request"})

    assert error.message == "URL must be http"
    assert error.details == {"status": 400, "code": "invalid_request"}


def test_map_api_error_carries_retry_after() -> None:
    error = map_api_error(429, {"error": "slow down", "retryAfter": 12})

    assert error.details is not None
    assert error.details["retryAfter"] == 12


def test_map_api_error_unknown_status_message() -> None:
    assert map_api_error(418, {}).message == "Unexpected error (418)"
    assert map_api_error(418, {"error": "teapot"}).message == "teapot"


def test_503_message_mentions_unavailable() -> None:
    assert "temporarily unavailable" in map_api_error(503, {}).message


@pytest.mark.parametrize(
    "exc",
    [
        TimeoutError(),
        asyncio.TimeoutError(),
        httpx.ReadTimeout("slow"),
        httpx.ConnectTimeout("slow"),
    ],
)
def test_timeouts_classify_first(exc: Exception) -> None:
    assert classify_error(exc).type is ErrorType.TIMEOUT


def test_structured_error_passes_through_unchanged() -> None:
    original = create_error(ErrorType.RATE_LIMIT, "busy", {"status": 429})

    assert classify_error(ClientError(original)) is original


@pytest.mark.parametrize("exc", [httpx.ConnectError("refused"), ConnectionResetError("reset")])
def test_transport_failures_are_network(exc: Exception) -> None:
    error = classify_error(exc)

    assert error.type is ErrorType.NETWORK
    assert error.details is not None
    assert "originalError" in error.details


def test_anything_else_is_unknown() -> None:
    error = classify_error(KeyError("boom"))

    assert error.type is ErrorType.UNKNOWN
    assert error.recoverable


def test_errors_carry_iso_timestamp() -> None:
    error = classify_error(ValueError("x"))

    assert "T" in error.timestamp
    assert error.timestamp.endswith("+00:00")


def test_transient_errors() -> None:
    assert is_transient(httpx.ConnectError("refused"))
    assert is_transient(ClientError(map_api_error(500, {})))
    assert is_transient(ClientError(map_api_error(429, {})))
    assert not is_transient(ClientError(map_api_error(400, {})))
    assert not is_transient(ClientError(map_api_error(404, {})))
    assert not is_transient(httpx.ReadTimeout("slow"))


def test_presentation_per_type() -> None:
    assert present(create_error(ErrorType.NETWORK, "x")).color == "orange"
    assert present(create_error(ErrorType.VALIDATION, "x")).color == "yellow"
    assert present(create_error(ErrorType.RATE_LIMIT, "x")).color == "blue"
    assert present(create_error(ErrorType.SERVER, "x")).color == "red"
    assert present(create_error(ErrorType.TIMEOUT, "x")).icon == "clock"
    assert present(create_error(ErrorType.UNKNOWN, "x")).hint is None
