"""
Async HTTP client for fetching the daily menu page.

One GET per call: no retries, no rate limiting, no caching. Every failure
surfaces as its own exception type.
"""
import asyncio
import logging
from typing import Optional, Dict
from urllib.parse import urlparse

import aiohttp
from aiohttp import ClientTimeout, ClientError

from zomato_menu.config import settings
from zomato_menu.exceptions import NetworkError, HttpStatusError, FetchTimeoutError

logger = logging.getLogger(__name__)


def default_headers() -> Dict[str, str]:
    """Browser-like header set; Zomato rejects some minimal ones."""
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Encoding": "identity",
        # lower case, the server is picky about it
        "Connection": "keep-alive",
        "DNT": "1",
        "Upgrade-Insecure-Requests": "1",
        "Cache-Control": "max-age=0",
        "Accept-Language": settings.accept_language,
    }


class HttpClient:
    """
    Async HTTP client owning a single aiohttp session.

    Use as an async context manager so the connection is released even if
    the caller is cancelled:

        async with HttpClient() as client:
            html = await client.get(url)
    """

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.timeout_seconds = timeout_seconds or settings.request_timeout_seconds
        self.headers = default_headers()
        if headers:
            self.headers.update(headers)
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "HttpClient":
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=ClientTimeout(total=self.timeout_seconds),
                headers=self.headers,
            )
        return self._session

    @staticmethod
    def _get_domain(url: str) -> str:
        return urlparse(url).netloc or "unknown"

    async def get(self, url: str) -> str:
        """
        Perform a single GET request.

        Args:
            url: Target URL

        Returns:
            Response body as text

        Raises:
            HttpStatusError: non-2xx response
            FetchTimeoutError: request exceeded timeout_seconds
            NetworkError: DNS/connection failure
        """
        domain = self._get_domain(url)
        session = await self._get_session()

        try:
            logger.debug(f"GET {url}")

            async with session.get(url) as response:
                logger.debug(f"Response: {response.status} from {domain}")

                if not 200 <= response.status < 300:
                    logger.warning(f"Unexpected status {response.status} from {url}")
                    raise HttpStatusError(response.status, url)

                return await response.text(errors="replace")

        except asyncio.TimeoutError as e:
            logger.warning(f"Timeout for {url} after {self.timeout_seconds}s")
            raise FetchTimeoutError(url, self.timeout_seconds) from e

        except (ClientError, OSError) as e:
            logger.warning(f"Network error for {url}: {e}")
            raise NetworkError(url, str(e) or type(e).__name__) from e

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
