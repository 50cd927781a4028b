from fastapi import APIRouter

from reelpick.core.cache import response_cache
from reelpick.services.session_store import session_store

router = APIRouter(tags=["health"])


@router.get("/health", summary="Simple readiness probe")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/metrics", summary="Runtime metrics (lightweight)")
async def metrics() -> dict:
    """Return in-process cache and session sizes."""
    return {
        "cached_responses": len(response_cache),
        "tracked_users": session_store.count_users(),
    }
