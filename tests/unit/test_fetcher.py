"""
Tests for the HTTP fetch used by the URL entry points.

All traffic goes through httpx.MockTransport; nothing touches the network.
"""

import httpx
import pytest
from readcore.config import FetchConfig
from readcore.crawler import fetcher
from readcore.crawler.fetcher import FetchError, fetch_html, is_url


def mock_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.mark.unit
class TestIsUrl:
    """URL detection for mixed file/URL inputs."""

    @pytest.mark.parametrize("value", ["http://example.com", "https://example.com/a?b=c", "  https://x.org/ "])
    def test_urls(self, value):
        assert is_url(value)

    @pytest.mark.parametrize("value", ["example.com", "/tmp/page.html", "ftp://example.com/file", "https://", ""])
    def test_not_urls(self, value):
        assert not is_url(value)


@pytest.mark.unit
class TestFetchHtml:
    """Behavior of fetch_html against mocked responses."""

    def test_successful_fetch(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                content=b"<html><body>ok</body></html>",
                headers={"Content-Type": "text/html; charset=windows-1252"},
            )

        with mock_client(handler) as client:
            page = fetch_html("https://example.com/page", client=client)

        assert page.status == 200
        assert page.content == b"<html><body>ok</body></html>"
        assert page.charset == "windows-1252"
        assert page.url == "https://example.com/page"
        assert page.final_url == "https://example.com/page"

    def test_missing_charset_is_none(self):
        with mock_client(lambda request: httpx.Response(200, content=b"<p>x</p>")) as client:
            page = fetch_html("https://example.com/", client=client)

        assert page.charset is None

    def test_http_error_status(self):
        with mock_client(lambda request: httpx.Response(404)) as client:
            with pytest.raises(FetchError) as exc_info:
                fetch_html("https://example.com/missing", client=client)

        assert "HTTP 404" in str(exc_info.value)
        assert exc_info.value.url == "https://example.com/missing"

    def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with mock_client(handler) as client:
            with pytest.raises(FetchError, match="connection refused"):
                fetch_html("https://example.com/", client=client)

    @pytest.mark.parametrize("url", ["ftp://example.com/file", "not a url", "/local/path.html"])
    def test_rejects_non_http_urls(self, url):
        with pytest.raises(FetchError):
            fetch_html(url)

    def test_oversized_body_rejected(self):
        config = FetchConfig(max_bytes=10)
        with mock_client(lambda request: httpx.Response(200, content=b"x" * 11)) as client:
            with pytest.raises(FetchError, match="larger than 10 bytes"):
                fetch_html("https://example.com/", config, client=client)

    def test_oversized_stream_stops_reading(self):
        served = []

        def body():
            for _ in range(100):
                served.append(8)
                yield b"x" * 8

        config = FetchConfig(max_bytes=10)
        with mock_client(lambda request: httpx.Response(200, content=body())) as client:
            with pytest.raises(FetchError, match="larger than 10 bytes"):
                fetch_html("https://example.com/", config, client=client)

        assert len(served) < 100

    def test_body_at_limit_accepted(self):
        config = FetchConfig(max_bytes=10)
        with mock_client(lambda request: httpx.Response(200, content=b"x" * 10)) as client:
            page = fetch_html("https://example.com/", config, client=client)

        assert page.content == b"x" * 10

    def test_own_client_uses_configuration(self, monkeypatch):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["user_agent"] = request.headers["User-Agent"]
            return httpx.Response(200, content=b"<p>x</p>")

        real_client = httpx.Client
        monkeypatch.setattr(
            fetcher.httpx,
            "Client",
            lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs),
        )

        fetch_html("https://example.com/", FetchConfig(user_agent="TestBot/1.0"))

        assert seen["user_agent"] == "TestBot/1.0"
