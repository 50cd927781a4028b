import functools
from typing import Any

from reelpick.core.config import settings
from reelpick.core.constants import MODE_OBSCURE, VOTE_COUNT_THRESHOLD
from reelpick.services.tmdb.client import TMDBClient


class TMDBService:
    """
    Service for the TMDB movie endpoints used by the recommendation pipeline.
    Every call goes through the shared response cache.
    """

    def __init__(self, api_key: str | None, language: str = "en-US"):
        self.client = TMDBClient(api_key=api_key, language=language)

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.close()

    async def search_movie(self, query: str) -> dict[str, Any]:
        """Free-text movie search."""
        return await self.client.get("/search/movie", params={"query": query})

    async def get_movie_details(self, movie_id: int) -> dict[str, Any]:
        """Get the detail record of a movie (rating, popularity, overview, poster)."""
        return await self.client.get(f"/movie/{movie_id}")

    async def get_movie_credits(self, movie_id: int) -> dict[str, Any]:
        """Get cast and crew of a movie."""
        return await self.client.get(f"/movie/{movie_id}/credits")

    async def get_discover(
        self,
        with_genres: str,
        start_year: int,
        end_year: int,
        mode: str,
        page: int = 1,
    ) -> dict[str, Any]:
        """Get one page of movies matching a genre and release window, filtered by mode."""
        params: dict[str, Any] = {
            "with_genres": with_genres,
            "primary_release_date.gte": f"{start_year}-01-01",
            "primary_release_date.lte": f"{end_year}-12-31",
            "page": page,
        }
        if mode == MODE_OBSCURE:
            params["vote_count.lte"] = VOTE_COUNT_THRESHOLD
            params["sort_by"] = "vote_average.desc"
        else:
            params["vote_count.gte"] = VOTE_COUNT_THRESHOLD
            params["sort_by"] = "popularity.desc"
        return await self.client.get("/discover/movie", params=params)


def find_director(credits: dict[str, Any] | None) -> str | None:
    """Return the name of the first crew member credited as Director."""
    if not credits or not isinstance(credits, dict):
        return None
    for member in credits.get("crew") or []:
        if isinstance(member, dict) and member.get("job") == "Director" and member.get("name"):
            return member["name"]
    return None


@functools.lru_cache(maxsize=16)
def get_tmdb_service(language: str = "en-US") -> TMDBService:
    return TMDBService(api_key=settings.TMDB_API_KEY, language=language)
