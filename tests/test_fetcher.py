import httpx
import pytest

from blogsum.core.errors import (
    ContentNotFoundError,
    UnsupportedContentError,
    UpstreamFetchError,
    UpstreamFetchForbiddenError,
)
from blogsum.services.fetcher import fetch_page

_REAL_ASYNC_CLIENT = httpx.AsyncClient


def _install(monkeypatch, handler) -> list[httpx.Request]:
    seen: list[httpx.Request] = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    def factory(**kwargs):
        return _REAL_ASYNC_CLIENT(transport=httpx.MockTransport(recording_handler), **kwargs)

    monkeypatch.setattr("blogsum.services.fetcher.httpx.AsyncClient", factory)
    return seen


@pytest.mark.asyncio
async def test_fetch_page_sends_user_agent(monkeypatch) -> None:
    seen = _install(
        monkeypatch,
        lambda request: httpx.Response(200, html="<p>Hello</p>"),
    )

    page = await fetch_page("https://medium.com/@x/y")

    assert page.text == "<p>Hello</p>"
    assert page.status_code == 200
    assert page.content_type is not None and page.content_type.startswith("text/html")
    assert seen[0].headers["User-Agent"] == "Mozilla/5.0"
    assert seen[0].method == "GET"


@pytest.mark.asyncio
async def test_fetch_page_follows_redirects(monkeypatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.com/blog/new"})
        return httpx.Response(200, html="<p>moved</p>")

    _install(monkeypatch, handler)

    page = await fetch_page("https://example.com/old")

    assert page.url == "https://example.com/blog/new"
    assert page.text == "<p>moved</p>"


@pytest.mark.asyncio
async def test_transport_failure_is_upstream_fetch_failed(monkeypatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    _install(monkeypatch, handler)

    with pytest.raises(UpstreamFetchError) as excinfo:
        await fetch_page("https://medium.com/@x/y")

    assert excinfo.value.status_code == 500
    assert excinfo.value.code == "upstream_fetch_failed"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "error_type"),
    [
        (401, UpstreamFetchForbiddenError),
        (403, UpstreamFetchForbiddenError),
        (404, ContentNotFoundError),
        (410, ContentNotFoundError),
        (500, UpstreamFetchError),
        (502, UpstreamFetchError),
    ],
)
async def test_upstream_status_mapping(monkeypatch, status: int, error_type: type) -> None:
    _install(monkeypatch, lambda request: httpx.Response(status, html="nope"))

    with pytest.raises(error_type):
        await fetch_page("https://medium.com/@x/y")


@pytest.mark.asyncio
async def test_binary_content_is_rejected(monkeypatch) -> None:
    _install(
        monkeypatch,
        lambda request: httpx.Response(200, content=b"%PDF-1.7", headers={"Content-Type": "application/pdf"}),
    )

    with pytest.raises(UnsupportedContentError):
        await fetch_page("https://example.com/post/paper.pdf")


@pytest.mark.asyncio
async def test_missing_content_type_is_accepted(monkeypatch) -> None:
    _install(monkeypatch, lambda request: httpx.Response(200, content=b"<p>plain</p>"))

    page = await fetch_page("https://example.com/post/1")

    assert page.text == "<p>plain</p>"
