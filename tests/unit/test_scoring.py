from __future__ import annotations

import asyncio

import pytest

from reelpick.models.candidate import Candidate
from reelpick.models.profile import PreferenceProfile
from reelpick.services.recommendation.enrichment import CandidateEnricher
from reelpick.services.recommendation.scoring import RecommendationScoring
from tests.helpers import FakeTMDBService

PROFILE = PreferenceProfile(top_directors=["Agnès Varda", "Wong Kar-wai"])


def _candidate(**kwargs) -> Candidate:
    base = {"id": 1, "title": "X", "vote_average": 7.0, "popularity": 3.0, "director": "Nobody"}
    base.update(kwargs)
    return Candidate(**base)


def test_formula_popular_mode():
    assert RecommendationScoring.calculate_score(_candidate(), PROFILE, "popular") == pytest.approx(10.5)


def test_formula_obscure_mode_subtracts_popularity():
    assert RecommendationScoring.calculate_score(_candidate(), PROFILE, "obscure") == pytest.approx(7.5)


def test_director_match_adds_exactly_five():
    liked = RecommendationScoring.calculate_score(_candidate(director="Wong Kar-wai"), PROFILE, "obscure")
    other = RecommendationScoring.calculate_score(_candidate(), PROFILE, "obscure")
    assert liked - other == pytest.approx(5.0)


def test_monotonic_in_rating_and_popularity():
    ratings = [RecommendationScoring.calculate_score(_candidate(vote_average=r), PROFILE, "obscure") for r in (2, 5, 9)]
    assert ratings == sorted(ratings)

    pops = [RecommendationScoring.calculate_score(_candidate(popularity=p), PROFILE, "obscure") for p in (1, 10, 100)]
    assert pops == sorted(pops, reverse=True)

    popular_mode = {RecommendationScoring.calculate_score(_candidate(popularity=p), PROFILE, "popular") for p in (1, 100)}
    assert len(popular_mode) == 1


def test_enrichment_fills_fields_and_scores():
    tmdb = FakeTMDBService(
        directors={1: "Agnès Varda"},
        details={1: {"vote_average": 8.0, "popularity": 2.5, "poster_path": "/p.jpg", "overview": "Beach."}},
    )
    (candidate,) = asyncio.run(
        CandidateEnricher(tmdb).enrich_and_score([Candidate(id=1, title="Beaches")], PROFILE, "obscure")
    )

    assert candidate.director == "Agnès Varda"
    assert candidate.vote_average == 8.0
    assert candidate.poster_path == "/p.jpg"
    assert candidate.overview == "Beach."
    assert candidate.score == pytest.approx(5 + 12.0 - 2.5)


def test_enrichment_failures_use_defaults_and_keep_candidate():
    tmdb = FakeTMDBService(fail={1})
    candidates = asyncio.run(
        CandidateEnricher(tmdb).enrich_and_score([Candidate(id=1, title="Lost"), Candidate(id=2)], PROFILE, "obscure")
    )

    lost = candidates[0]
    assert len(candidates) == 2
    assert lost.director == "Unknown"
    assert lost.vote_average == 0.0
    assert lost.popularity == 0.0
    assert lost.poster_path == "placeholder.jpg"
    assert lost.overview == "No description available."
    assert lost.score == 0.0
