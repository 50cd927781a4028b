from typing import Any

from reelpick.core.base_client import BaseClient
from reelpick.core.cache import ResponseCache, response_cache
from reelpick.core.config import settings
from reelpick.core.version import __version__


class TMDBClient(BaseClient):
    """
    Client for interacting with the TMDB API.
    """

    def __init__(
        self,
        api_key: str | None,
        language: str = "en-US",
        timeout: float = settings.REQUEST_TIMEOUT_SECONDS,
        max_concurrency: int = settings.MAX_CONCURRENT_REQUESTS,
        cache: ResponseCache | None = response_cache,
    ):
        headers = {
            "User-Agent": f"Reelpick/{__version__}",
            "Accept": "application/json",
        }
        super().__init__(
            base_url=settings.TMDB_BASE_URL,
            timeout=timeout,
            max_concurrency=max_concurrency,
            headers=headers,
            cache=cache,
        )
        self.api_key = api_key
        self.language = language

    async def get(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> Any:
        """Override GET to always include API key and language."""
        params = dict(params or {})
        params["api_key"] = self.api_key
        params["language"] = self.language
        return await super().get(url, params=params, **kwargs)
