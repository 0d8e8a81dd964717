"""Domain errors raised by the service layer."""
from __future__ import annotations


class AuthenticationError(ValueError):
    """Credentials could not be verified."""


class ConflictError(ValueError):
    """A unique value (username, email) is already taken."""


class UserNotFoundError(LookupError):
    """A username could not be resolved to a stored user."""

    def __init__(self, username: str) -> None:
        super().__init__("User not found")
        self.username = username


class TokenError(ValueError):
    """A bearer token is malformed, wrongly signed or incomplete."""


class TokenExpiredError(TokenError):
    """A bearer token was valid but its expiry has passed."""
