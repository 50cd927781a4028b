import asyncio
from collections import Counter
from typing import Any

from loguru import logger

from reelpick.core.config import settings
from reelpick.models.profile import PreferenceProfile
from reelpick.services.tmdb.service import find_director
from reelpick.shared.outcome import Outcome, settle


class PreferenceInferencer:
    """
    Builds a PreferenceProfile from watched titles.

    Strategy:
    1. Resolve each title to the first TMDB search hit (concurrently)
    2. Fetch credits of every resolved movie and tally its director
    3. Rank directors by count, ties by first appearance in the history
    """

    def __init__(self, tmdb_service: Any, limit: int | None = None):
        self.tmdb_service = tmdb_service
        self.limit = limit or settings.TOP_CREATORS_LIMIT

    async def infer(self, titles: list[str]) -> PreferenceProfile:
        outcomes = await asyncio.gather(*[self._resolve(title) for title in titles])

        watched_ids: list[int] = []
        counts: Counter[str] = Counter()
        for outcome in outcomes:
            movie_id, director = outcome.value
            if movie_id is None:
                continue
            if movie_id not in watched_ids:
                watched_ids.append(movie_id)
            if director:
                counts[director] += 1

        # Counter preserves insertion order, sorted() is stable
        ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
        top_directors = [name for name, _ in ranked[: self.limit]]

        resolved = sum(1 for o in outcomes if o.value[0] is not None)
        logger.info(f"Resolved {resolved}/{len(titles)} titles, top directors: {top_directors}")
        return PreferenceProfile(top_directors=top_directors, watched_ids=watched_ids)

    async def _resolve(self, title: str) -> Outcome[tuple[int | None, str | None]]:
        """Resolve one title to (movie id, director). Never raises."""
        search = await settle(self.tmdb_service.search_movie(title), {}, label=f"Search '{title}'")
        results = search.value.get("results") or []
        first = results[0] if results and isinstance(results[0], dict) else None
        if not first or first.get("id") is None:
            return Outcome(value=(None, None), defaulted=True, error=search.error)

        movie_id = first["id"]
        credits = await settle(self.tmdb_service.get_movie_credits(movie_id), {}, label=f"Credits {movie_id}")
        return Outcome(value=(movie_id, find_director(credits.value)), defaulted=credits.defaulted, error=credits.error)
