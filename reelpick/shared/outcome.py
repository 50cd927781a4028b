from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

from loguru import logger

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a best-effort sub-task: either the fetched value or a documented default."""

    value: T
    defaulted: bool = False
    error: str | None = None


async def settle(awaitable: Awaitable[T | None], default: T, label: str = "") -> Outcome[T]:
    """
    Await a sub-task and wrap its result.

    Exceptions and empty results become a defaulted Outcome so sibling tasks in the
    same batch keep running. Cancellation is not intercepted.
    """
    try:
        value = await awaitable
    except Exception as e:
        logger.warning(f"{label or 'Sub-task'} failed, using default: {e}")
        return Outcome(value=default, defaulted=True, error=str(e) or type(e).__name__)
    if value is None:
        return Outcome(value=default, defaulted=True)
    return Outcome(value=value)
