import random
from typing import Any

from loguru import logger

from reelpick.core.config import settings
from reelpick.models.recommendation import RecommendationItem, RecommendRequest
from reelpick.services.letterboxd.history import HistoryFetcher
from reelpick.services.recommendation.discovery import CandidateDiscoverer
from reelpick.services.recommendation.enrichment import CandidateEnricher
from reelpick.services.recommendation.metadata import RecommendationMetadata
from reelpick.services.recommendation.preferences import PreferenceInferencer
from reelpick.services.recommendation.selection import select
from reelpick.services.session_store import SessionStore, session_store
from reelpick.services.tmdb.service import get_tmdb_service


class RecommendationEngine:
    """
    Runs the recommendation pipeline for one request.

    history -> preferences + watched ids -> discovery -> enrichment/scoring -> selection.
    Each stage completes before the next one starts.
    """

    def __init__(
        self,
        tmdb_service: Any | None = None,
        history: HistoryFetcher | None = None,
        sessions: SessionStore | None = None,
        rng: random.Random | None = None,
    ):
        self.tmdb_service = tmdb_service or get_tmdb_service()
        self.history = history or HistoryFetcher()
        self.sessions = sessions or session_store
        self.rng = rng
        self.inferencer = PreferenceInferencer(self.tmdb_service)
        self.discoverer = CandidateDiscoverer(self.tmdb_service)
        self.enricher = CandidateEnricher(self.tmdb_service)

    async def close(self):
        await self.history.close()
        await self.tmdb_service.close()

    async def recommend(self, request: RecommendRequest) -> list[RecommendationItem]:
        """
        Return up to RESULT_COUNT fresh recommendations and remember them for the user.

        Raises AccountNotFoundError when the user's history cannot be read.
        """
        username = request.username
        titles = await self.history.fetch_titles(username)
        sample = titles[: settings.HISTORY_SAMPLE_SIZE]

        profile = await self.inferencer.infer(sample)

        excluded_ids = set(self.sessions.get_excluded(username))
        excluded_ids.update(profile.watched_ids)

        candidates = await self.discoverer.discover(
            request.genre,
            request.start_year,
            request.end_year,
            request.mode,
            excluded_ids=excluded_ids,
        )
        if not candidates:
            logger.info(f"No candidates left for {username}")
            return []

        scored = await self.enricher.enrich_and_score(candidates, profile, request.mode)
        chosen = select(scored, rng=self.rng)

        self.sessions.add_excluded(username, [c.id for c in chosen])
        logger.info(f"Recommending {[c.id for c in chosen]} to {username}")
        return [RecommendationMetadata.format_item(c) for c in chosen]

    def reset(self, username: str) -> None:
        self.sessions.reset(username)


recommendation_engine = RecommendationEngine()
