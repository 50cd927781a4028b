from reelpick.core.config import settings
from reelpick.core.constants import PLACEHOLDER_POSTER, UNKNOWN_TITLE, UNKNOWN_YEAR
from reelpick.models.candidate import Candidate
from reelpick.models.recommendation import RecommendationItem


class RecommendationMetadata:
    """
    Formats enriched candidates into the public result shape.
    """

    @staticmethod
    def extract_year(release_date: str | None) -> str:
        """Leading four digits of a release date, or Unknown."""
        if release_date and len(release_date) >= 4 and release_date[:4].isdigit():
            return release_date[:4]
        return UNKNOWN_YEAR

    @staticmethod
    def poster_url(poster_path: str | None) -> str:
        if not poster_path or poster_path == PLACEHOLDER_POSTER:
            return PLACEHOLDER_POSTER
        return f"{settings.IMAGE_BASE_URL}{poster_path}"

    @classmethod
    def format_item(cls, candidate: Candidate) -> RecommendationItem:
        return RecommendationItem(
            title=candidate.title or UNKNOWN_TITLE,
            poster=cls.poster_url(candidate.poster_path),
            director=candidate.director,
            year=cls.extract_year(candidate.release_date),
            overview=candidate.overview,
            id=candidate.id,
        )
