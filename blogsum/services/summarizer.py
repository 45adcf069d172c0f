from __future__ import annotations

from typing import Any

import openai
from openai import AsyncOpenAI

from blogsum.core.constants import (
    DEFAULT_COMPLETION_BASE_URL,
    DEFAULT_COMPLETION_MODEL,
    SUMMARY_PROMPT,
    TRANSLATION_PROMPT,
)
from blogsum.core.errors import (
    AppError,
    ConfigurationError,
    ExternalServiceError,
    RateLimitError,
)

class SummarizationError(ExternalServiceError):
    code = "completion_service_error"


class CompletionRateLimitedError(RateLimitError):
    code = "completion_service_rate_limited"


class CompletionAuthError(AppError):
    status_code = 500
    code = "completion_service_auth_failed"


class CompletionUnavailableError(AppError):
    status_code = 503
    code = "completion_service_unavailable"


def _retry_after_seconds(exc: openai.APIStatusError) -> float | None:
    raw = exc.response.headers.get("retry-after")
    if not raw:
        return None
    try:
        return max(float(raw), 0.0)
    except ValueError:
        return None


def _translate_api_error(exc: openai.APIError) -> AppError:
    if isinstance(exc, openai.RateLimitError):
        return CompletionRateLimitedError(
            "The summarization service is busy. Please wait a moment and try again.",
            retry_after=_retry_after_seconds(exc),
        )
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return CompletionAuthError("The summarization service rejected our credentials.")
    if isinstance(exc, (openai.APIConnectionError, openai.InternalServerError)):
        return CompletionUnavailableError("The summarization service is temporarily unavailable.")
    return SummarizationError("Failed to call the summarization service.")


class CompletionClient:
    """Plain-text prompt in, plain-text completion out."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_COMPLETION_MODEL,
        base_url: str = DEFAULT_COMPLETION_BASE_URL,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Missing GEMINI_API_KEY.")
        self.model = model
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url)

    async def complete(self, prompt: str) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.APIError as exc:
            raise _translate_api_error(exc) from exc

        content: Any = response.choices[0].message.content if response.choices else None
        if not isinstance(content, str) or not content.strip():
            raise SummarizationError("Empty completion response.")

        return content.strip()


async def summarize_text(client: CompletionClient, text: str) -> str:
    return await client.complete(SUMMARY_PROMPT.format(text=text))


async def translate_to_urdu(client: CompletionClient, summary: str) -> str:
    return await client.complete(TRANSLATION_PROMPT.format(summary=summary))
