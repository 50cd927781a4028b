import asyncio
from typing import Any

import httpx
from loguru import logger

from reelpick.core.cache import ResponseCache


class BaseClient:
    """
    Base asynchronous HTTP client with a concurrency cap, a timeout, optional response caching and logging.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        max_concurrency: int = 20,
        headers: dict[str, str] | None = None,
        cache: ResponseCache | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self.cache = cache
        self._sem = asyncio.Semaphore(max_concurrency)
        self._client: httpx.AsyncClient | None = None

    async def get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx.AsyncClient instance."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, headers=self.headers, follow_redirects=True
            )
        return self._client

    async def close(self):
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def cache_key(self, url: str, params: dict[str, Any] | None = None) -> str:
        """Build the exact outbound request signature used as cache key."""
        full = httpx.URL(self.base_url + url) if self.base_url else httpx.URL(url)
        if params:
            full = full.copy_merge_params(params)
        return str(full)

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Internal request handler. One attempt per call; errors propagate to the caller."""
        client = await self.get_client()
        try:
            async with self._sem:
                response = await client.request(method, url, **kwargs)
            response.raise_for_status()
        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            logger.warning(f"Request failed ({method} {url}): {str(e)}")
            raise
        return response

    async def get(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> Any:
        """Perform a GET request and return the JSON response, served from cache when possible."""
        key = self.cache_key(url, params) if self.cache is not None else None
        if key is not None:
            cached = self.cache.get(key)
            if cached is not None:
                return cached

        response = await self._request("GET", url, params=params, **kwargs)
        data = response.json()

        # Only successful responses reach this point; failures are never cached
        if key is not None:
            self.cache.set(key, data)
        return data

    async def get_text(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> str:
        """Perform an uncached GET request and return the raw body."""
        response = await self._request("GET", url, params=params, **kwargs)
        return response.text
