from __future__ import annotations

from dataclasses import dataclass

from blogsum.client.errors import ErrorType, StructuredError


@dataclass(frozen=True)
class ErrorPresentation:
    icon: str
    color: str
    hint: str | None = None


_DEFAULT = ErrorPresentation(icon="alert-circle", color="red")

_PRESENTATIONS: dict[ErrorType, ErrorPresentation] = {
    ErrorType.NETWORK: ErrorPresentation(
        icon="wifi",
        color="orange",
        hint="Check your internet connection and try again.",
    ),
    ErrorType.TIMEOUT: ErrorPresentation(
        icon="clock",
        color="red",
        hint="The request took too long. Try again or use a different URL.",
    ),
    ErrorType.RATE_LIMIT: ErrorPresentation(
        icon="shield",
        color="blue",
        hint="Please wait a moment before making another request.",
    ),
    ErrorType.VALIDATION: ErrorPresentation(
        icon="alert-circle",
        color="yellow",
        hint="Please check the URL format and try again.",
    ),
}


def present(error: StructuredError) -> ErrorPresentation:
    return _PRESENTATIONS.get(error.type, _DEFAULT)
