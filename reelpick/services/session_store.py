import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable, MutableMapping

from cachetools import TTLCache
from loguru import logger

from reelpick.core.config import settings


class SessionStore(ABC):
    """Per-user record of catalog ids that were already recommended."""

    @abstractmethod
    def get_excluded(self, username: str) -> list[int]:
        """Return ids previously recommended to the user, oldest first."""

    @abstractmethod
    def add_excluded(self, username: str, ids: Iterable[int]) -> None:
        """Append ids to the user's exclusion set."""

    @abstractmethod
    def reset(self, username: str) -> None:
        """Forget everything recommended to the user."""

    @abstractmethod
    def count_users(self) -> int:
        """Number of users with a tracked exclusion set."""


class _MappingSessionStore(SessionStore):
    def __init__(self, mapping: MutableMapping[str, list[int]]):
        self._data = mapping
        self._lock = threading.Lock()

    def get_excluded(self, username: str) -> list[int]:
        with self._lock:
            return list(self._data.get(username, []))

    def add_excluded(self, username: str, ids: Iterable[int]) -> None:
        with self._lock:
            current = list(self._data.get(username, []))
            current.extend(i for i in ids if i not in current)
            # Reassign so TTL-backed mappings refresh the entry
            self._data[username] = current

    def reset(self, username: str) -> None:
        with self._lock:
            self._data.pop(username, None)
        logger.info(f"Exclusion set reset for {username}")

    def count_users(self) -> int:
        with self._lock:
            return len(self._data)


class InMemorySessionStore(_MappingSessionStore):
    """Process-wide exclusion map. Unbounded and lost on restart."""

    def __init__(self) -> None:
        super().__init__({})


class TTLSessionStore(_MappingSessionStore):
    """Exclusion map whose per-user entries expire after a period without new recommendations."""

    def __init__(self, ttl: int, maxsize: int = 100_000) -> None:
        super().__init__(TTLCache(maxsize=maxsize, ttl=ttl))


def create_session_store() -> SessionStore:
    if settings.SESSION_TTL_SECONDS > 0:
        logger.info(f"Using TTL session store ({settings.SESSION_TTL_SECONDS}s)")
        return TTLSessionStore(ttl=settings.SESSION_TTL_SECONDS)
    return InMemorySessionStore()


session_store = create_session_store()
