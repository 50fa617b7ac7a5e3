"""
Remote document retrieval over HTTP.
"""

from __future__ import annotations

from typing import Optional

import httpx
import structlog

from a11ycheck.config.config import FetchConfig
from a11ycheck.exceptions import FetchError

logger = structlog.get_logger(__name__)


def is_url(target: str) -> bool:
    return target.startswith(("http://", "https://"))


class PageFetcher:
    """Fetches the markup of a page with a shared ``httpx.AsyncClient``."""

    def __init__(self, config: Optional[FetchConfig] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.config = config or FetchConfig()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "PageFetcher":
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=self.config.follow_redirects,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> str:
        """Return the decoded body of ``url``.

        Raises:
            FetchError: On transport errors and non-2xx responses
        """
        if self._client is None:
            raise RuntimeError("PageFetcher must be used as an async context manager")
        logger.info("Fetching page", url=url)
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e
        logger.debug("Fetched page", url=url, status=response.status_code, bytes=len(response.content))
        return response.text
