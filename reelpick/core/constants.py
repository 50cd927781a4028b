"""
Core constants used across the application. Keep these simple and documented.
"""

MODE_OBSCURE: str = "obscure"
MODE_POPULAR: str = "popular"
# Mode used when the caller does not pass one
DEFAULT_MODE: str = MODE_OBSCURE

# Vote-count boundary between "obscure" and "popular" discovery
VOTE_COUNT_THRESHOLD: int = 500

DIRECTOR_MATCH_BONUS: float = 5.0
RATING_WEIGHT: float = 1.5

UNKNOWN_DIRECTOR: str = "Unknown"
UNKNOWN_YEAR: str = "Unknown"
UNKNOWN_TITLE: str = "Unknown Title"
PLACEHOLDER_POSTER: str = "placeholder.jpg"
PLACEHOLDER_OVERVIEW: str = "No description available."

ACCOUNT_NOT_FOUND_MESSAGE: str = "Account does not exist, try again."
MISSING_PARAMS_MESSAGE: str = "username, genre, startYear, and endYear are required"
