"""
Fetches raw HTML for the URL entry points.

Network access lives here, outside the extraction core: callers that
already hold markup never touch this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse

import httpx
import structlog
from httpx import HTTPError, HTTPStatusError

from ..config.config import FetchConfig

logger = structlog.get_logger(__name__)

ALLOWED_SCHEMES = ("http", "https")


class FetchError(RuntimeError):
    """Raised when a document cannot be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


@dataclass(frozen=True)
class FetchedPage:
    """Raw response body plus the charset the server declared."""

    url: str
    final_url: str
    status: int
    content: bytes
    charset: str | None


def is_url(value: str) -> bool:
    """True if ``value`` looks like an absolute http(s) URL."""
    parsed = urlparse(value.strip())
    return parsed.scheme in ALLOWED_SCHEMES and bool(parsed.netloc)


def fetch_html(url: str, config: FetchConfig | None = None, client: httpx.Client | None = None) -> FetchedPage:
    """
    Retrieve ``url`` and return its body undecoded.

    Args:
        url: Absolute http(s) URL
        config: Timeout, user agent and size limit
        client: Optional pre-configured client; one is created otherwise

    Raises:
        FetchError: On invalid URLs, transport errors, non-2xx statuses
            and oversized bodies
    """
    config = config or FetchConfig()
    if not is_url(url):
        raise FetchError(url, "only absolute http(s) URLs can be fetched")

    own_client = client is None
    if own_client:
        client = httpx.Client(
            timeout=config.timeout,
            follow_redirects=config.follow_redirects,
            headers={"User-Agent": config.user_agent},
        )

    try:
        with client.stream("GET", url) as response:
            response.raise_for_status()
            declared = response.headers.get("Content-Length")
            if declared and declared.isdigit() and int(declared) > config.max_bytes:
                raise FetchError(url, f"response larger than {config.max_bytes} bytes")

            chunks = []
            size = 0
            for chunk in response.iter_bytes():
                size += len(chunk)
                if size > config.max_bytes:
                    raise FetchError(url, f"response larger than {config.max_bytes} bytes")
                chunks.append(chunk)
    except HTTPStatusError as e:
        raise FetchError(url, f"HTTP {e.response.status_code}") from e
    except HTTPError as e:
        raise FetchError(url, str(e) or type(e).__name__) from e
    finally:
        if own_client:
            client.close()

    content = b"".join(chunks)
    logger.debug(
        "Fetched document",
        url=url,
        final_url=str(response.url),
        status=response.status_code,
        size=size,
        charset=response.charset_encoding,
    )
    return FetchedPage(
        url=url,
        final_url=str(response.url),
        status=response.status_code,
        content=content,
        charset=response.charset_encoding,
    )
