from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from reelpick.core.cache import response_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_response_cache():
    response_cache.clear()
    yield
    response_cache.clear()
