"""Security helpers for password hashing and bearer token signing."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from .config import Settings, get_settings
from .exceptions import TokenError, TokenExpiredError


_password_context = CryptContext(schemes=["argon2"], deprecated="auto")

ROLES = ("ADMIN", "USER")


class PasswordHasher:
    """Hash and verify user passwords using Argon2id."""

    @staticmethod
    def hash(password: str) -> str:
        return _password_context.hash(password)

    @staticmethod
    def verify(password: str, hashed: str | None) -> bool:
        if not password or not hashed:
            return False
        try:
            return _password_context.verify(password, hashed)
        except (ValueError, TypeError):
            # Unrecognized or corrupt hash: treat as a mismatch.
            return False


@dataclass(frozen=True)
class TokenClaims:
    username: str
    role: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class Identity:
    """Who is making the current request, as established from a bearer token."""

    username: str
    role: str


class TokenService:
    """Issue and validate signed, stateless JWT access tokens."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        if not settings.secret_key:
            raise ValueError("Token secret must not be empty")
        self._secret = settings.secret_key
        self._algorithm = settings.jwt_algorithm
        self._lifetime = timedelta(minutes=settings.access_token_expire_minutes)
        self._leeway = settings.token_leeway_seconds

    def issue(self, username: str, role: str, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "sub": username,
            "role": role,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> TokenClaims:
        if not token:
            raise TokenError("Token is empty")
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                leeway=self._leeway,
                options={"require": ["sub", "role", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise TokenError("Invalid token") from exc

        username = payload["sub"]
        role = payload["role"]
        if not isinstance(username, str) or not username:
            raise TokenError("Token subject is invalid")
        if role not in ROLES:
            raise TokenError("Token role is invalid")
        return TokenClaims(
            username=username,
            role=role,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
