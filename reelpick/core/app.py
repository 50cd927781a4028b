from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from reelpick.api.main import api_router
from reelpick.services.recommendation.engine import recommendation_engine

from .config import settings
from .version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    if not settings.TMDB_API_KEY:
        logger.warning("TMDB_API_KEY is not set. Catalog requests will fail until it is configured.")
    yield
    try:
        await recommendation_engine.close()
        logger.info("Upstream HTTP clients closed")
    except Exception as exc:
        logger.warning(f"Failed to close upstream HTTP clients: {exc}")


app = FastAPI(
    title="Reelpick",
    description="Movie recommendations from Letterboxd watch history",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
