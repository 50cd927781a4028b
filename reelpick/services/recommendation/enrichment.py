import asyncio
from typing import Any

from loguru import logger

from reelpick.core.constants import PLACEHOLDER_OVERVIEW, PLACEHOLDER_POSTER, UNKNOWN_DIRECTOR
from reelpick.models.candidate import Candidate
from reelpick.models.profile import PreferenceProfile
from reelpick.services.recommendation.scoring import RecommendationScoring
from reelpick.services.tmdb.service import find_director
from reelpick.shared.outcome import settle


class CandidateEnricher:
    """
    Fills in detail and credits for discovered candidates, then scores them.
    A failed fetch leaves documented defaults in place; the candidate is kept.
    """

    def __init__(self, tmdb_service: Any):
        self.tmdb_service = tmdb_service

    async def enrich_and_score(
        self, candidates: list[Candidate], profile: PreferenceProfile, mode: str
    ) -> list[Candidate]:
        await asyncio.gather(*[self._enrich_one(c, profile, mode) for c in candidates])
        logger.info(f"Enriched and scored {len(candidates)} candidates")
        return candidates

    async def _enrich_one(self, candidate: Candidate, profile: PreferenceProfile, mode: str) -> None:
        details, credits = await asyncio.gather(
            settle(self.tmdb_service.get_movie_details(candidate.id), {}, label=f"Details {candidate.id}"),
            settle(self.tmdb_service.get_movie_credits(candidate.id), {}, label=f"Credits {candidate.id}"),
        )
        self.apply_details(candidate, details.value)
        candidate.director = find_director(credits.value) or UNKNOWN_DIRECTOR
        candidate.score = RecommendationScoring.calculate_score(candidate, profile, mode)

    @staticmethod
    def apply_details(candidate: Candidate, details: dict[str, Any]) -> None:
        """Copy detail fields onto the candidate, falling back to defaults for anything missing."""
        candidate.vote_average = float(details.get("vote_average") or 0.0)
        candidate.popularity = float(details.get("popularity") or 0.0)
        candidate.poster_path = details.get("poster_path") or PLACEHOLDER_POSTER
        candidate.overview = details.get("overview") or PLACEHOLDER_OVERVIEW
        if not candidate.title and details.get("title"):
            candidate.title = details["title"]
        if not candidate.release_date and details.get("release_date"):
            candidate.release_date = details["release_date"]
