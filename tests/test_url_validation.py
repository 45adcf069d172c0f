import pytest

from blogsum.client.errors import ErrorType
from blogsum.client.validation import BlogUrlPolicy, looks_like_blog, validate_url


@pytest.mark.parametrize("candidate", ["", "   ", "\n"])
def test_empty_input_is_validation_error(candidate: str) -> None:
    error = validate_url(candidate)

    assert error is not None
    assert error.type is ErrorType.VALIDATION
    assert error.message == "Please enter a URL"


@pytest.mark.parametrize(
    "candidate",
    ["not a url", "medium.com/@x/y", "//medium.com/post/1", "http://", "https://exa mple.com/blog/x", "http://host:99999/"],
)
def test_unparsable_input_is_invalid_url(candidate: str) -> None:
    error = validate_url(candidate)

    assert error is not None
    assert error.type is ErrorType.INVALID_URL


@pytest.mark.parametrize(
    "candidate",
    ["ftp://medium.com/post/1", "mailto:someone@example.blog", "file:///tmp/blog/x.html", "javascript:alert(1)"],
)
def test_non_http_schemes_are_invalid_url(candidate: str) -> None:
    error = validate_url(candidate)

    assert error is not None
    assert error.type is ErrorType.INVALID_URL
    assert error.message == "URL must use HTTP or HTTPS protocol"


def test_non_blog_url_gets_advisory_warning() -> None:
    error = validate_url("https://example.com/")

    assert error is not None
    assert error.type is ErrorType.VALIDATION
    assert error.advisory
    assert error.details == {"url": "https://example.com/", "advisory": True}
    assert error.recoverable


@pytest.mark.parametrize(
    "candidate",
    [
        "https://medium.com/@x/y",
        "https://someone.wordpress.com/2024/01/01/hello",
        "http://news.blogspot.com/",
        "https://writer.substack.com/p/essay",
        "https://dev.to/someone/post",
        "https://someone.hashnode.com/title",
        "https://ideas.blog/",
        "https://example.com/blog/launch",
        "https://example.com/post/42",
        "https://example.com/article/abc",
    ],
)
def test_blog_urls_pass(candidate: str) -> None:
    assert looks_like_blog(candidate)
    assert validate_url(candidate) is None


def test_policy_off_skips_blog_check() -> None:
    assert validate_url("https://example.com/", BlogUrlPolicy.OFF) is None


def test_policy_off_still_checks_syntax() -> None:
    error = validate_url("ftp://example.com/", BlogUrlPolicy.OFF)

    assert error is not None
    assert error.type is ErrorType.INVALID_URL


def test_surrounding_whitespace_is_ignored() -> None:
    assert validate_url("  https://medium.com/@x/y  ") is None
