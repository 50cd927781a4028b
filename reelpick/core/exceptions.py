from reelpick.core.constants import ACCOUNT_NOT_FOUND_MESSAGE


class ReelpickError(Exception):
    """Base error for failures that end a recommendation request."""


class InvalidRequestError(ReelpickError):
    """Raised when request parameters are missing or malformed."""


class AccountNotFoundError(ReelpickError):
    """Raised when a user's watch history cannot be resolved."""

    def __init__(self, username: str, message: str = ACCOUNT_NOT_FOUND_MESSAGE):
        super().__init__(message)
        self.username = username
