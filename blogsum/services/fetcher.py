from __future__ import annotations

from dataclasses import dataclass

import httpx

from blogsum.core.constants import DEFAULT_FETCH_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from blogsum.core.errors import (
    ContentNotFoundError,
    UnsupportedContentError,
    UpstreamFetchError,
    UpstreamFetchForbiddenError,
)

_TEXTUAL_TYPES = ("application/xhtml+xml", "application/xml")


@dataclass(frozen=True)
class FetchedPage:
    url: str
    status_code: int
    content_type: str | None
    text: str


def _is_textual(content_type: str | None) -> bool:
    if not content_type:
        return True
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type.startswith("text/") or media_type in _TEXTUAL_TYPES


def _raise_for_status(response: httpx.Response) -> None:
    status = response.status_code
    if status < 400:
        return
    if status in (401, 403):
        raise UpstreamFetchForbiddenError(f"The blog refused access to the page (HTTP {status}).")
    if status in (404, 410):
        raise ContentNotFoundError("Blog post not found or unable to access content.")
    raise UpstreamFetchError(f"Failed to fetch the blog page (HTTP {status}).")


async def fetch_page(
    url: str,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
) -> FetchedPage:
    """GET the page with a browser-like User-Agent and return its body as text."""
    try:
        async with httpx.AsyncClient(follow_redirects=True) as client:
            response = await client.get(
                url,
                headers={"User-Agent": user_agent},
                timeout=timeout_seconds,
            )
    except httpx.HTTPError as exc:
        raise UpstreamFetchError("Failed to fetch the blog page.") from exc

    _raise_for_status(response)

    content_type = response.headers.get("content-type")
    if not _is_textual(content_type):
        raise UnsupportedContentError(f"The URL did not return a web page ({content_type}).")

    return FetchedPage(
        url=str(response.url),
        status_code=response.status_code,
        content_type=content_type,
        text=response.text,
    )
