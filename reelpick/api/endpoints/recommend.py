from fastapi import APIRouter
from loguru import logger

from reelpick.core.constants import DEFAULT_MODE, MISSING_PARAMS_MESSAGE
from reelpick.core.exceptions import AccountNotFoundError, InvalidRequestError
from reelpick.models.recommendation import RecommendRequest, RecommendResponse
from reelpick.services.recommendation.engine import recommendation_engine
from reelpick.services.tmdb.genre import resolve_genre

router = APIRouter(prefix="/api", tags=["recommendations"])


def _build_request(
    username: str | None,
    genre: str | None,
    start_year: str | None,
    end_year: str | None,
    preference: str | None,
) -> RecommendRequest:
    """Validate raw query values. Raises InvalidRequestError before any upstream call."""
    username = (username or "").strip()
    if not username or not genre or not start_year or not end_year:
        raise InvalidRequestError(MISSING_PARAMS_MESSAGE)

    try:
        start, end = int(start_year), int(end_year)
    except ValueError:
        raise InvalidRequestError("startYear and endYear must be numbers") from None
    if start > end:
        raise InvalidRequestError("startYear must not be after endYear")

    with_genres = resolve_genre(genre)
    if not with_genres:
        raise InvalidRequestError(f"Unknown genre: {genre}")

    return RecommendRequest(
        username=username,
        genre=with_genres,
        start_year=start,
        end_year=end,
        mode=preference or DEFAULT_MODE,
    )


@router.get("/recommend", response_model=RecommendResponse, response_model_exclude_none=True)
async def recommend(
    username: str | None = None,
    genre: str | None = None,
    startYear: str | None = None,
    endYear: str | None = None,
    preference: str | None = None,
) -> RecommendResponse:
    try:
        request = _build_request(username, genre, startYear, endYear, preference)
    except InvalidRequestError as e:
        return RecommendResponse(success=False, error=str(e))

    try:
        results = await recommendation_engine.recommend(request)
        return RecommendResponse(success=True, results=results)
    except AccountNotFoundError as e:
        return RecommendResponse(success=False, error=str(e))
    except Exception as e:
        logger.exception(f"Error building recommendations for {request.username}: {e}")
        return RecommendResponse(success=False, error=str(e))


@router.get("/reset")
async def reset(username: str | None = None) -> dict:
    if username:
        recommendation_engine.reset(username)
    return {"success": True}
