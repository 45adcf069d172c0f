from __future__ import annotations

import time
import uuid
from collections import OrderedDict, deque

from fastapi import Request
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from blogsum.core.errors import AppError, RateLimitError, RequestTooLargeError
from blogsum.core.handlers import error_response
from blogsum.core.logging import log_context

# A summarize payload is one URL.
MAX_REQUEST_BYTES = 16_000

WINDOW_SECONDS = 60.0
MAX_TRACKED_CLIENTS = 10_000


class ClientRateLimiter:
    """
    Per-client sliding window of request timestamps.

    Clients are kept in least-recently-seen order so the oldest one is
    dropped once more than `max_clients` are tracked.
    """

    def __init__(
        self,
        limit: int,
        *,
        window_seconds: float = WINDOW_SECONDS,
        max_clients: int = MAX_TRACKED_CLIENTS,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self.max_clients = max_clients
        self._hits: OrderedDict[str, deque[float]] = OrderedDict()

    @property
    def enabled(self) -> bool:
        return self.limit > 0

    def __len__(self) -> int:
        return len(self._hits)

    def hit(self, client: str, now: float | None = None) -> None:
        """Record one request for `client`, or raise RateLimitError when over the limit."""
        now = time.monotonic() if now is None else now
        hits = self._hits.pop(client, None)
        if hits is None:
            hits = deque()
        self._hits[client] = hits
        while hits and now - hits[0] > self.window_seconds:
            hits.popleft()

        while len(self._hits) > self.max_clients:
            self._hits.popitem(last=False)

        if len(hits) >= self.limit:
            wait = self.window_seconds - (now - hits[0])
            raise RateLimitError("Too many requests.", retry_after=round(max(wait, 1.0), 1))
        hits.append(now)

    def clear(self) -> None:
        self._hits.clear()


def client_key(request: Request) -> str:
    forwarded = (request.headers.get("x-forwarded-for") or "").split(",")[0].strip()
    if forwarded:
        return forwarded
    return request.client.host if request.client else "unknown"


async def read_limited_body(request: Request, max_bytes: int = MAX_REQUEST_BYTES) -> None:
    """Buffer the body so the route can read it again, refusing anything over `max_bytes`."""
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > max_bytes:
        raise RequestTooLargeError("Request body too large.")

    body = b""
    async for chunk in request.stream():
        body += chunk
        if len(body) > max_bytes:
            raise RequestTooLargeError("Request body too large.")
    request._body = body


async def log_requests(request: Request, call_next: RequestResponseEndpoint) -> Response:
    request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
    request.state.request_id = request_id
    limiter: ClientRateLimiter | None = getattr(request.app.state, "rate_limiter", None)

    with log_context(request_id=request_id, method=request.method, path=request.url.path):
        # Exception handlers never see errors raised here.
        try:
            await read_limited_body(request)
            if limiter is not None and limiter.enabled:
                limiter.hit(client_key(request))
        except AppError as exc:
            response: Response = error_response(exc)
        else:
            response = await call_next(request)
        response.headers["X-Request-Id"] = request_id
        return response
