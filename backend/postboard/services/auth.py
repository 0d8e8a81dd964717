"""Login and registration flows."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.exceptions import AuthenticationError, ConflictError
from postboard.core.security import TokenService
from postboard.db.session import transaction
from postboard.models.user import User
from postboard.services.users import authenticate_user, create_user, email_exists, username_exists

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


@dataclass(frozen=True)
class AuthResult:
    token: str
    user: User


async def login(
    session: AsyncSession,
    username: str,
    password: str,
    tokens: TokenService | None = None,
) -> AuthResult:
    user = await authenticate_user(session, username, password)
    if user is None:
        logger.warning("Failed login attempt for username %r", username)
        raise AuthenticationError(INVALID_CREDENTIALS)

    tokens = tokens or TokenService()
    return AuthResult(token=tokens.issue(user.username, user.role), user=user)


async def register(
    session: AsyncSession,
    *,
    username: str,
    password: str,
    email: str,
    full_name: str,
    tokens: TokenService | None = None,
) -> AuthResult:
    """Create a USER account and issue its first token.

    The existence checks give readable errors; the unique constraints on
    ``users`` catch a registration that races past them.
    """

    try:
        async with transaction(session):
            if await username_exists(session, username):
                raise ConflictError("Username already exists")
            if await email_exists(session, email):
                raise ConflictError("Email already exists")
            user = await create_user(
                session,
                username=username,
                password=password,
                email=email,
                full_name=full_name,
                role="USER",
            )
    except IntegrityError as exc:
        logger.info("Registration for %r lost a uniqueness race", username)
        raise ConflictError("Username or email already exists") from exc

    logger.info("Registered user %s", user.username)
    tokens = tokens or TokenService()
    return AuthResult(token=tokens.issue(user.username, user.role), user=user)
