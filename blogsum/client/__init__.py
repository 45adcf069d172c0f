"""Client side of blogsum: validation, error taxonomy, retries and the session."""

from blogsum.client.classify import classify_error, map_api_error
from blogsum.client.errors import ClientError, ErrorType, SessionBusyError, StructuredError, create_error
from blogsum.client.http import SummaryApiClient
from blogsum.client.presentation import ErrorPresentation, present
from blogsum.client.retry import backoff_delay, retry_with_backoff
from blogsum.client.session import SessionState, SummarizerSession
from blogsum.client.validation import BlogUrlPolicy, looks_like_blog, validate_url

__all__ = [
    "BlogUrlPolicy",
    "ClientError",
    "ErrorPresentation",
    "ErrorType",
    "SessionBusyError",
    "SessionState",
    "StructuredError",
    "SummarizerSession",
    "SummaryApiClient",
    "backoff_delay",
    "classify_error",
    "create_error",
    "looks_like_blog",
    "map_api_error",
    "present",
    "retry_with_backoff",
    "validate_url",
]
