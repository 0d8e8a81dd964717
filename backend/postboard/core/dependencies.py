"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.exceptions import TokenError
from postboard.core.security import Identity, TokenService
from postboard.db.session import get_session

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_db() -> AsyncIterator[AsyncSession]:
    async with get_session() as session:
        yield session


def get_token_service() -> TokenService:
    return TokenService()


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """Resolve the caller from the ``Authorization: Bearer`` header.

    Any failure ends the request with 401 before the route body runs.
    """

    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")

    try:
        claims = tokens.validate(credentials.credentials)
    except TokenError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        raise _unauthorized("Invalid or expired token") from exc

    return Identity(username=claims.username, role=claims.role)
