from fastapi import APIRouter

from reelpick.core.cache import response_cache

router = APIRouter(prefix="/cache")


@router.delete("/")
async def clear_caches():
    """
    Clear the upstream response cache.
    This will force fresh data to be fetched from external APIs on next request.
    """
    response_cache.clear()
    return {"message": "All caches cleared successfully", "status": "success"}
