from pydantic import BaseModel


class RecommendationItem(BaseModel):
    """Public shape of a single recommended movie."""

    title: str
    poster: str
    director: str
    year: str
    overview: str
    id: int


class RecommendResponse(BaseModel):
    success: bool
    results: list[RecommendationItem] | None = None
    error: str | None = None


class RecommendRequest(BaseModel):
    username: str
    genre: str
    start_year: int
    end_year: int
    mode: str
