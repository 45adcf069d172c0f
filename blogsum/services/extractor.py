from __future__ import annotations

import math
import re

from bs4 import BeautifulSoup

from blogsum.core.constants import MAX_CONTENT_CHARS, NON_CONTENT_TAGS, WORDS_PER_MINUTE

_WHITESPACE_RE = re.compile(r"\s+")


def _parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_text(html: str) -> str:
    """Return the visible text of a page as one whitespace-normalized line.

    Script, style, noscript and template subtrees are dropped entirely so
    their contents never leak into the prompt.
    """
    soup = _parse(html)
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()
    return normalize_whitespace(soup.get_text(" "))


def extract_title(html: str) -> str | None:
    soup = _parse(html)
    for tag in (soup.title, soup.find("h1")):
        if tag is None:
            continue
        title = normalize_whitespace(tag.get_text(" "))
        if title:
            return title
    return None


def truncate(text: str, limit: int = MAX_CONTENT_CHARS) -> str:
    return text[:limit]


def count_words(text: str) -> int:
    return len(text.split())


def estimate_reading_time(word_count: int, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    minutes = max(1, math.ceil(word_count / words_per_minute))
    return f"{minutes} min read"
