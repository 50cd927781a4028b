from reelpick.core.constants import DIRECTOR_MATCH_BONUS, MODE_OBSCURE, RATING_WEIGHT
from reelpick.models.candidate import Candidate
from reelpick.models.profile import PreferenceProfile


class RecommendationScoring:
    """
    Ranking heuristic: favour liked directors, reward rating, and in obscure
    mode penalize mainstream popularity.
    """

    @staticmethod
    def director_score(candidate: Candidate, profile: PreferenceProfile) -> float:
        return DIRECTOR_MATCH_BONUS if profile.likes_director(candidate.director) else 0.0

    @staticmethod
    def rating_score(candidate: Candidate) -> float:
        return float(candidate.vote_average or 0.0) * RATING_WEIGHT

    @staticmethod
    def popularity_penalty(candidate: Candidate, mode: str) -> float:
        if mode == MODE_OBSCURE:
            return float(candidate.popularity or 0.0)
        return 0.0

    @classmethod
    def calculate_score(cls, candidate: Candidate, profile: PreferenceProfile, mode: str) -> float:
        return (
            cls.director_score(candidate, profile)
            + cls.rating_score(candidate)
            - cls.popularity_penalty(candidate, mode)
        )
