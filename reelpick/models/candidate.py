from typing import Any

from pydantic import BaseModel

from reelpick.core.constants import PLACEHOLDER_OVERVIEW, PLACEHOLDER_POSTER, UNKNOWN_DIRECTOR


class Candidate(BaseModel):
    """A catalog movie under consideration. Partial after discovery, complete after enrichment."""

    id: int
    title: str | None = None
    release_date: str | None = None
    director: str = UNKNOWN_DIRECTOR
    vote_average: float = 0.0
    popularity: float = 0.0
    poster_path: str = PLACEHOLDER_POSTER
    overview: str = PLACEHOLDER_OVERVIEW
    score: float = 0.0

    @classmethod
    def from_discover(cls, item: dict[str, Any]) -> "Candidate":
        return cls(id=item["id"], title=item.get("title"), release_date=item.get("release_date"))
