from __future__ import annotations

import asyncio

from reelpick.services.recommendation.preferences import PreferenceInferencer
from tests.helpers import FakeTMDBService


def test_ranks_directors_by_count():
    tmdb = FakeTMDBService(
        search={"A": 1, "B": 2, "C": 3, "D": 4},
        directors={1: "Lynch", 2: "Varda", 3: "Varda", 4: "Lynch"},
    )
    tmdb.directors[5] = "Lynch"
    tmdb.search["E"] = 5

    profile = asyncio.run(PreferenceInferencer(tmdb).infer(["A", "B", "C", "D", "E"]))

    assert profile.top_directors == ["Lynch", "Varda"]
    assert profile.watched_ids == [1, 2, 3, 4, 5]


def test_ties_follow_history_order():
    tmdb = FakeTMDBService(search={"A": 1, "B": 2}, directors={1: "Ozu", 2: "Kiarostami"})
    profile = asyncio.run(PreferenceInferencer(tmdb).infer(["B", "A"]))
    assert profile.top_directors == ["Kiarostami", "Ozu"]


def test_caps_to_limit():
    titles = [f"T{i}" for i in range(8)]
    tmdb = FakeTMDBService(
        search={t: i + 1 for i, t in enumerate(titles)},
        directors={i + 1: f"Director {i}" for i in range(8)},
    )
    profile = asyncio.run(PreferenceInferencer(tmdb, limit=5).infer(titles))
    assert len(profile.top_directors) == 5


def test_unresolved_and_failing_titles_are_skipped():
    tmdb = FakeTMDBService(
        search={"Known": 1, "Broken credits": 2},
        directors={1: "Denis"},
        fail={"Exploding search", 2},
    )
    profile = asyncio.run(
        PreferenceInferencer(tmdb).infer(["Known", "Nowhere", "Exploding search", "Broken credits"])
    )
    assert profile.top_directors == ["Denis"]
    # A credits failure still counts as a resolved (watched) title
    assert profile.watched_ids == [1, 2]


def test_no_resolution_gives_empty_profile():
    profile = asyncio.run(PreferenceInferencer(FakeTMDBService()).infer(["Unknown film"]))
    assert profile.top_directors == []
    assert profile.watched_ids == []
