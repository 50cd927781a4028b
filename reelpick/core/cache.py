import threading
import time
from typing import Any, Optional

from cachetools import TTLCache
from loguru import logger

from reelpick.core.config import settings


class ResponseCache:
    """
    In-memory cache for parsed upstream responses, keyed by request URL.
    Entries expire after a fixed TTL; there is no other eviction policy.
    """

    _instance: Optional["ResponseCache"] = None

    def __init__(self, ttl: int | None = None, maxsize: int | None = None):
        self.ttl = ttl or settings.CACHE_TTL_SECONDS
        self._store: TTLCache = TTLCache(maxsize=maxsize or settings.CACHE_MAX_ENTRIES, ttl=self.ttl)
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "ResponseCache":
        if cls._instance is None:
            logger.info("Initializing in-memory response cache")
            cls._instance = ResponseCache()
        return cls._instance

    def get(self, key: str) -> Any:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            # Per-entry TTL shorter than the cache-wide one
            if expires_at is not None and expires_at <= time.monotonic():
                self._store.pop(key, None)
                return None
            return value

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """
        Store a value.

        A `ttl` shorter than the cache-wide TTL expires the entry early. Longer values are
        clamped: every entry expires after the cache-wide TTL at most.
        """
        expires_at = time.monotonic() + ttl if ttl and ttl < self.ttl else None
        with self._lock:
            self._store[key] = (expires_at, value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        with self._lock:
            self._store.expire()
            return len(self._store)


response_cache = ResponseCache.get_instance()
