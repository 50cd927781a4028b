import random

from reelpick.core.config import settings
from reelpick.models.candidate import Candidate


def rank(candidates: list[Candidate]) -> list[Candidate]:
    """Sort by score descending; equal scores fall back to ascending catalog id."""
    return sorted(candidates, key=lambda c: (-c.score, c.id))


def select(
    candidates: list[Candidate],
    pool_size: int | None = None,
    count: int | None = None,
    rng: random.Random | None = None,
) -> list[Candidate]:
    """
    Pick a random handful from the best-scored candidates.

    The top `pool_size` are shuffled (Fisher-Yates) and the first `count` returned.
    """
    pool_size = pool_size or settings.SELECTION_POOL_SIZE
    count = count or settings.RESULT_COUNT
    pool = rank(candidates)[:pool_size]
    (rng or random).shuffle(pool)
    return pool[:count]
