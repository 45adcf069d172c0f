class AppError(Exception):
    """Base class for all application errors."""

    status_code = 500
    code = "internal_error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidRequestError(AppError):
    """Client sent a malformed or invalid request (400)."""

    status_code = 400
    code = "invalid_request"


class UnsupportedContentError(AppError):
    """Target page did not return textual content (400)."""

    status_code = 400
    code = "unsupported_content"


class UpstreamFetchForbiddenError(AppError):
    """Target site refused to serve the page (403)."""

    status_code = 403
    code = "upstream_fetch_forbidden"


class ContentNotFoundError(AppError):
    """Target page does not exist or has no readable text (404)."""

    status_code = 404
    code = "content_not_found"


class RequestTooLargeError(AppError):
    """Request body exceeds the allowed size (413)."""

    status_code = 413
    code = "request_too_large"


class RateLimitError(AppError):
    """Client has exceeded rate limits (429)."""

    status_code = 429
    code = "rate_limit_exceeded"

    def __init__(self, detail: str, retry_after: float | None = None) -> None:
        super().__init__(detail)
        self.retry_after = retry_after


class ConfigurationError(AppError):
    """Server misconfiguration (500)."""

    status_code = 500
    code = "configuration_error"


class UpstreamFetchError(AppError):
    """Target page could not be fetched (500)."""

    status_code = 500
    code = "upstream_fetch_failed"


class ExternalServiceError(AppError):
    """Upstream service failed or returned an invalid response (502)."""

    status_code = 502
    code = "external_service_error"


class NotReadyError(AppError):
    """Service is temporarily unavailable (503)."""

    status_code = 503
    code = "not_ready"
