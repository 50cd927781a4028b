from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    TMDB_API_KEY: str | None = None
    PORT: int = 8000
    APP_ENV: Literal["development", "production"] = "production"

    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    LETTERBOXD_BASE_URL: str = "https://letterboxd.com"
    IMAGE_BASE_URL: str = "https://image.tmdb.org/t/p/w500"

    CACHE_TTL_SECONDS: int = 3600
    CACHE_MAX_ENTRIES: int = 10000
    SESSION_TTL_SECONDS: int = 0  # 0 = never expire
    REQUEST_TIMEOUT_SECONDS: float = 10.0
    # Cap on simultaneous outbound calls per upstream client
    MAX_CONCURRENT_REQUESTS: int = 20

    HISTORY_SAMPLE_SIZE: int = 15
    TOP_CREATORS_LIMIT: int = 5
    DISCOVERY_PAGES: int = 5
    SELECTION_POOL_SIZE: int = 50
    RESULT_COUNT: int = 3


settings = Settings()
