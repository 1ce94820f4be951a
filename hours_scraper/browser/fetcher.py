"""
Page fetchers.
Retrieve raw HTML for a URL; every failure surfaces as FetchError.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional
from urllib.parse import urlparse

import httpx

from ..errors import FetchError
from ..models import ExtractorConfig
from ..utils import get_logger

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


def validate_url(url: str) -> str:
    """Reject anything that is not an absolute http(s) URL."""
    parsed = urlparse(url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise FetchError(f"Invalid URL: {url!r}", url=url or "")
    return url


class DocumentFetcher(ABC):
    """
    Base class for fetchers.

    A fetcher may be used as an async context manager to share resources
    (HTTP connection pool, browser) across several fetches; fetch() also
    works on its own.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.config = config or ExtractorConfig()
        self.logger = get_logger()

    async def start(self):
        pass

    async def stop(self):
        pass

    @abstractmethod
    async def fetch(self, url: str) -> str:
        """Return the page HTML or raise FetchError."""
        pass

    @property
    def user_agent(self) -> str:
        return self.config.user_agent or DEFAULT_USER_AGENT

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()


class HttpFetcher(DocumentFetcher):
    """
    Plain HTTP fetcher (no JavaScript) built on httpx.
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        super().__init__(config)
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def headers(self) -> Dict[str, str]:
        return {
            'User-Agent': self.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        }

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self.headers,
            timeout=self.config.request_timeout_sec,
            follow_redirects=True,
            transport=self.transport,
        )

    async def start(self):
        if self._client is None:
            self._client = self._build_client()

    async def stop(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> str:
        validate_url(url)

        if self._client is not None:
            return await self._get(self._client, url)

        async with self._build_client() as client:
            return await self._get(client, url)

    async def _get(self, client: httpx.AsyncClient, url: str) -> str:
        self.logger.debug(f"Fetching {url}")

        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchError(f"Failed to fetch website: timeout after {self.config.request_timeout_sec}s", url=url) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise FetchError(f"Failed to fetch website: HTTP {status}", url=url, status=status) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch website: {e}", url=url) from e

        self.logger.debug(f"Fetched {url} ({len(response.text)} chars)")
        return response.text


def create_fetcher(config: ExtractorConfig) -> DocumentFetcher:
    """Pick the fetcher the configuration asks for."""
    if config.render_javascript:
        from .manager import BrowserFetcher
        return BrowserFetcher(config)
    return HttpFetcher(config)
