from __future__ import annotations

from typing import Any

import httpx

from reelpick.core.exceptions import AccountNotFoundError


def credits_for(director: str | None) -> dict[str, Any]:
    crew = [{"job": "Producer", "name": "Someone Else"}]
    if director:
        crew.append({"job": "Director", "name": director})
    return {"cast": [], "crew": crew}


class FakeTMDBService:
    """In-memory stand-in for TMDBService. Ids listed in `fail` raise on detail/credits."""

    def __init__(
        self,
        search: dict[str, int] | None = None,
        directors: dict[int, str] | None = None,
        details: dict[int, dict[str, Any]] | None = None,
        pages: dict[int, list[dict[str, Any]]] | None = None,
        fail: set[Any] | None = None,
    ):
        self.search = search or {}
        self.directors = directors or {}
        self.details = details or {}
        self.pages = pages or {}
        self.fail = fail or set()
        self.calls: list[tuple] = []
        self.closed = False

    def _maybe_fail(self, key: Any) -> None:
        if key in self.fail:
            raise httpx.RequestError(f"boom {key}")

    async def search_movie(self, query: str) -> dict[str, Any]:
        self.calls.append(("search", query))
        self._maybe_fail(query)
        movie_id = self.search.get(query)
        return {"results": [{"id": movie_id, "title": query}] if movie_id else []}

    async def get_movie_credits(self, movie_id: int) -> dict[str, Any]:
        self.calls.append(("credits", movie_id))
        self._maybe_fail(movie_id)
        return credits_for(self.directors.get(movie_id))

    async def get_movie_details(self, movie_id: int) -> dict[str, Any]:
        self.calls.append(("details", movie_id))
        self._maybe_fail(movie_id)
        return self.details.get(movie_id, {"id": movie_id})

    async def get_discover(self, with_genres, start_year, end_year, mode, page=1) -> dict[str, Any]:
        self.calls.append(("discover", with_genres, start_year, end_year, mode, page))
        self._maybe_fail(("page", page))
        return {"page": page, "results": list(self.pages.get(page, []))}

    async def close(self):
        self.closed = True


class FakeHistory:
    def __init__(self, titles: dict[str, list[str]]):
        self.titles = titles
        self.calls: list[str] = []

    async def fetch_titles(self, username: str) -> list[str]:
        self.calls.append(username)
        titles = self.titles.get(username)
        if not titles:
            raise AccountNotFoundError(username)
        return list(titles)

    async def close(self):
        pass


def discover_item(movie_id: int, title: str | None = None, release_date: str = "2001-05-04") -> dict[str, Any]:
    return {"id": movie_id, "title": title or f"Movie {movie_id}", "release_date": release_date}
