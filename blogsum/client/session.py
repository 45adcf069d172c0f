from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Literal, Protocol

from blogsum.client.classify import classify_error, is_transient
from blogsum.client.errors import (
    ClipboardError,
    ErrorType,
    SessionBusyError,
    StructuredError,
    create_error,
)
from blogsum.client.retry import DEFAULT_BASE_DELAY_SECONDS, DEFAULT_MAX_RETRIES, retry_with_backoff
from blogsum.client.validation import BlogUrlPolicy, validate_url
from blogsum.schemas.summaries import SummaryResult

logger = logging.getLogger(__name__)

Tab = Literal["english", "urdu"]
TABS: tuple[Tab, ...] = ("english", "urdu")


class SessionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    IN_FLIGHT = "in_flight"
    RETRY_SCHEDULED = "retry_scheduled"
    SUCCESS = "success"
    FAILED = "failed"


# States from which a new submit is accepted.
_SUBMITTABLE = frozenset({SessionState.IDLE, SessionState.SUCCESS, SessionState.FAILED})


class SummaryApi(Protocol):
    async def summarize(self, url: str) -> SummaryResult: ...


class SummarizerSession:
    """
    One user's summarize interaction as an explicit state machine.

    A submit is rejected while a previous one is validating, in flight or
    waiting on a backoff timer, so two requests can never race to update
    the session. reset() cancels whatever is running.
    """

    def __init__(
        self,
        api: SummaryApi,
        *,
        policy: BlogUrlPolicy = BlogUrlPolicy.WARN,
        timeout_seconds: float = 30.0,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_BASE_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        on_retry: Callable[[int, float, Exception], None] | None = None,
    ) -> None:
        self._api = api
        self.policy = policy
        self.timeout_seconds = timeout_seconds
        self.max_retries = max_retries
        self.base_delay = base_delay
        self._sleep = sleep
        self._retry_listener = on_retry
        self._task: asyncio.Task[SummaryResult] | None = None
        self.online = True
        self.url = ""
        self.state = SessionState.IDLE
        self.result: SummaryResult | None = None
        self.error: StructuredError | None = None
        self.warning: StructuredError | None = None
        self.active_tab: Tab = "english"
        self.retry_count = 0

    @property
    def busy(self) -> bool:
        return self.state not in _SUBMITTABLE

    def set_url(self, url: str) -> None:
        self.url = url

    def set_online(self, online: bool) -> None:
        self.online = online

    def _fail(self, error: StructuredError) -> None:
        self.error = error
        self.state = SessionState.FAILED
        logger.info("summarize failed", extra={"error_type": error.type.value})

    def _on_retry(self, attempt: int, delay: float, exc: Exception) -> None:
        self.retry_count = attempt
        if self._retry_listener is not None:
            self._retry_listener(attempt, delay, exc)

    async def _backoff(self, delay: float) -> None:
        self.state = SessionState.RETRY_SCHEDULED
        await self._sleep(delay)
        self.state = SessionState.IN_FLIGHT

    async def _request(self, url: str) -> SummaryResult:
        return await asyncio.wait_for(
            retry_with_backoff(
                lambda: self._api.summarize(url),
                max_retries=self.max_retries,
                base_delay=self.base_delay,
                should_retry=is_transient,
                on_retry=self._on_retry,
                sleep=self._backoff,
            ),
            timeout=self.timeout_seconds,
        )

    async def submit(self) -> SummaryResult | None:
        """Validate the current URL and summarize it; returns None on failure."""
        if self.busy:
            raise SessionBusyError(f"Cannot submit while {self.state.value}.")

        if not self.online:
            self._fail(
                create_error(
                    ErrorType.NETWORK,
                    "No internet connection. Please check your network and try again.",
                )
            )
            return None

        self.state = SessionState.VALIDATING
        self.warning = None
        problem = validate_url(self.url, self.policy)
        if problem is not None:
            if problem.advisory and self.policy is BlogUrlPolicy.WARN:
                self.warning = problem
                logger.warning("url does not look like a blog", extra={"url": self.url.strip()})
            else:
                self._fail(problem)
                return None

        self.state = SessionState.IN_FLIGHT
        self.error = None
        self.result = None
        self.retry_count = 0

        task = asyncio.ensure_future(self._request(self.url.strip()))
        self._task = task
        try:
            result = await task
        except asyncio.CancelledError:
            if self._task is not task:
                # reset() already restored the defaults.
                return None
            raise
        except Exception as exc:
            if self._task is not task:
                return None
            self._fail(classify_error(exc))
            return None
        finally:
            replaced = self._task is not task
            if not replaced:
                self._task = None

        if replaced:
            # reset() ran after the request finished; drop the stale result.
            return None
        self.result = result
        self.retry_count = 0
        self.state = SessionState.SUCCESS
        return result

    async def retry_last_action(self) -> SummaryResult | None:
        if self.error is None or not self.error.recoverable:
            return None
        return await self.submit()

    def reset(self) -> None:
        """Cancel pending work and restore every field to its initial value."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
        self.url = ""
        self.result = None
        self.error = None
        self.warning = None
        self.active_tab = "english"
        self.retry_count = 0
        self.state = SessionState.IDLE

    def select_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab}")
        self.active_tab = tab  # type: ignore[assignment]

    @property
    def active_text(self) -> str | None:
        if self.result is None:
            return None
        if self.active_tab == "urdu":
            return self.result.urdu_summary
        return self.result.english_summary

    def copy_active_summary(self, writer: Callable[[str], None]) -> bool:
        text = self.active_text
        if text is None:
            return False
        try:
            writer(text)
        except (ClipboardError, OSError) as exc:
            self.error = create_error(
                ErrorType.UNKNOWN,
                "Failed to copy text to clipboard",
                {"originalError": str(exc)},
                recoverable=False,
            )
            return False
        return True
