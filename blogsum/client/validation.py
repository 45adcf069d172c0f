from __future__ import annotations

import re
from enum import Enum
from urllib.parse import urlsplit

from blogsum.client.errors import ErrorType, StructuredError, create_error

_ALLOWED_SCHEMES = ("http", "https")

BLOG_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern)
    for pattern in (
        r"medium\.com",
        r"wordpress\.com",
        r"blogspot\.com",
        r"substack\.com",
        r"dev\.to",
        r"hashnode\.com",
        r"\.blog",
        r"/blog/",
        r"/post/",
        r"/article/",
    )
)


class BlogUrlPolicy(str, Enum):
    """What to do when a URL does not look like a blog post."""

    WARN = "warn"  # record the advisory error, still submit
    BLOCK = "block"  # treat the advisory error as final
    OFF = "off"  # skip the blog check


def looks_like_blog(url: str) -> bool:
    return any(pattern.search(url) for pattern in BLOG_PATTERNS)


def _invalid_format(detail: str) -> StructuredError:
    return create_error(
        ErrorType.INVALID_URL,
        "Invalid URL format. Please check your URL.",
        {"originalError": detail},
    )


def validate_url(candidate: str, policy: BlogUrlPolicy = BlogUrlPolicy.WARN) -> StructuredError | None:
    """Return None for an acceptable URL, otherwise the error to show."""
    url = candidate.strip()
    if not url:
        return create_error(ErrorType.VALIDATION, "Please enter a URL")

    try:
        parts = urlsplit(url)
        # Accessing the port validates it.
        parts.port
    except ValueError as exc:
        return _invalid_format(str(exc))

    if not parts.scheme:
        return _invalid_format("URL is not absolute")
    if parts.scheme.lower() not in _ALLOWED_SCHEMES:
        return create_error(ErrorType.INVALID_URL, "URL must use HTTP or HTTPS protocol")
    hostname = parts.hostname
    if not hostname or any(char.isspace() for char in parts.netloc):
        return _invalid_format("URL has no valid host")

    if policy is not BlogUrlPolicy.OFF and not looks_like_blog(url):
        return create_error(
            ErrorType.VALIDATION,
            "This doesn't appear to be a blog URL. Please verify the link.",
            {"url": url, "advisory": True},
        )
    return None
