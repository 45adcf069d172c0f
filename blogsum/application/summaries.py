from __future__ import annotations

import logging
import time
from urllib.parse import urlparse

from blogsum.core.config import Settings
from blogsum.core.constants import GENERIC_ERROR_MESSAGE
from blogsum.core.errors import AppError, ContentNotFoundError
from blogsum.core.logging import log_context
from blogsum.schemas.summaries import SummarizeRequest, SummarizeResponse, SummaryResult
from blogsum.services.extractor import (
    count_words,
    estimate_reading_time,
    extract_text,
    extract_title,
    truncate,
)
from blogsum.services.fetcher import fetch_page
from blogsum.services.summarizer import CompletionClient, summarize_text, translate_to_urdu

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def _fallback_title(url: str) -> str:
    return urlparse(url).hostname or url


async def _run(url: str, settings: Settings) -> SummaryResult:
    step_start = time.perf_counter()
    page = await fetch_page(
        url,
        user_agent=settings.fetch_user_agent,
        timeout_seconds=settings.fetch_timeout_seconds,
    )
    logger.info(
        "fetch_page %.2fms",
        _elapsed_ms(step_start),
        extra={"status_code": page.status_code, "chars": len(page.text)},
    )

    text = extract_text(page.text)
    if not text:
        logger.warning("no readable text on page")
        raise ContentNotFoundError("No readable content found on the page.")
    words = count_words(text)
    prompt_text = truncate(text, settings.max_content_chars)
    logger.info("text extracted", extra={"words": words, "prompt_chars": len(prompt_text)})

    client = CompletionClient(
        settings.gemini_api_key,
        model=settings.completion_model,
        base_url=settings.completion_base_url,
    )

    step_start = time.perf_counter()
    summary = await summarize_text(client, prompt_text)
    logger.info("summarize_text %.2fms", _elapsed_ms(step_start))

    step_start = time.perf_counter()
    urdu = await translate_to_urdu(client, summary)
    logger.info("translate_to_urdu %.2fms", _elapsed_ms(step_start))

    return SummaryResult(
        title=extract_title(page.text) or _fallback_title(page.url),
        english_summary=summary,
        urdu_summary=urdu,
        reading_time=estimate_reading_time(words),
        word_count=f"{words:,} words",
    )


async def summarize_blog(request: SummarizeRequest, settings: Settings) -> SummarizeResponse:
    """Fetch, extract, summarize and translate one blog post; all or nothing."""
    url = str(request.url)
    with log_context(url=url):
        logger.info("summarize request start")
        try:
            result = await _run(url, settings)
        except AppError:
            raise
        except Exception as exc:
            logger.exception("summarize request failed unexpectedly")
            raise AppError(GENERIC_ERROR_MESSAGE) from exc
        logger.info("summarize request done")
    return SummarizeResponse(summary=result)
