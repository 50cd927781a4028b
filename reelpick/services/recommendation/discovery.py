import asyncio
from typing import Any

from loguru import logger

from reelpick.core.config import settings
from reelpick.models.candidate import Candidate
from reelpick.shared.outcome import settle


class CandidateDiscoverer:
    """
    Discovers candidate movies through the TMDB discover endpoint.
    Pages are fetched concurrently; a failed page contributes nothing.
    """

    def __init__(self, tmdb_service: Any, pages: int | None = None):
        self.tmdb_service = tmdb_service
        self.pages = pages or settings.DISCOVERY_PAGES

    async def discover(
        self,
        genre: str,
        start_year: int,
        end_year: int,
        mode: str,
        excluded_ids: set[int] | None = None,
        pages: int | None = None,
    ) -> list[Candidate]:
        excluded_ids = excluded_ids or set()
        page_count = pages or self.pages

        tasks = [
            self._fetch_page(genre, start_year, end_year, mode, page) for page in range(1, page_count + 1)
        ]
        results_batches = await asyncio.gather(*tasks)

        # Deduplicate by id right after merge, first occurrence wins
        all_candidates: dict[int, Candidate] = {}
        for batch in results_batches:
            for item in batch:
                item_id = item.get("id")
                if item_id is None or item_id in excluded_ids or item_id in all_candidates:
                    continue
                all_candidates[item_id] = Candidate.from_discover(item)

        logger.info(
            f"Discovered {len(all_candidates)} candidates for genre={genre} {start_year}-{end_year} mode={mode}"
        )
        return list(all_candidates.values())

    async def _fetch_page(self, genre: str, start_year: int, end_year: int, mode: str, page: int) -> list[dict]:
        """Helper to call TMDB discovery for a single page."""
        outcome = await settle(
            self.tmdb_service.get_discover(genre, start_year, end_year, mode, page=page),
            {},
            label=f"TMDB discovery page {page}",
        )
        return [it for it in outcome.value.get("results") or [] if isinstance(it, dict)]
