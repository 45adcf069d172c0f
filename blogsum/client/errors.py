from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorType(str, Enum):
    NETWORK = "network"
    VALIDATION = "validation"
    SERVER = "server"
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"
    INVALID_URL = "invalid_url"
    CONTENT_NOT_FOUND = "content_not_found"
    UNKNOWN = "unknown"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class StructuredError:
    """A classified failure as shown to the user."""

    type: ErrorType
    message: str
    details: dict[str, Any] | None = None
    recoverable: bool = True
    timestamp: str = field(default_factory=_utc_timestamp)

    @property
    def advisory(self) -> bool:
        return bool(self.details and self.details.get("advisory"))


def create_error(
    type: ErrorType,
    message: str,
    details: dict[str, Any] | None = None,
    recoverable: bool = True,
) -> StructuredError:
    return StructuredError(type=type, message=message, details=details, recoverable=recoverable)


class ClientError(Exception):
    """Raised by the API client with an already-classified error attached."""

    def __init__(self, error: StructuredError) -> None:
        super().__init__(error.message)
        self.error = error


class SessionBusyError(RuntimeError):
    """A summarize action is already running for this session."""


class ClipboardError(RuntimeError):
    """Text could not be handed to the system clipboard."""
