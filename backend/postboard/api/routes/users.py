"""User directory endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.dependencies import get_current_identity, get_db
from postboard.core.exceptions import UserNotFoundError
from postboard.core.security import Identity
from postboard.schemas.user import UserRead
from postboard.services import users as user_service

router = APIRouter(tags=["users"])


@router.get("/users", response_model=list[UserRead])
async def list_users(
    session: AsyncSession = Depends(get_db),
    _: Identity = Depends(get_current_identity),
) -> list[UserRead]:
    users = await user_service.list_users(session)
    return [UserRead.model_validate(user) for user in users]


@router.get("/me", response_model=UserRead)
async def get_current_user_info(
    session: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> UserRead:
    try:
        user = await user_service.require_user(session, identity.username)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return UserRead.model_validate(user)
