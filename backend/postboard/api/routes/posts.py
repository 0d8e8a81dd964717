"""Post endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.dependencies import get_current_identity, get_db
from postboard.core.exceptions import UserNotFoundError
from postboard.core.security import Identity
from postboard.schemas.post import PostCreate, PostRead
from postboard.services import posts as post_service

router = APIRouter(tags=["posts"])


@router.get("/data", response_model=list[PostRead])
async def list_all_posts(
    session: AsyncSession = Depends(get_db),
    _: Identity = Depends(get_current_identity),
) -> list[PostRead]:
    posts = await post_service.list_all(session)
    return [PostRead.model_validate(post) for post in posts]


@router.post("/posts", response_model=PostRead)
async def create_post(
    payload: PostCreate,
    session: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> PostRead:
    try:
        post = await post_service.create_post(session, identity, payload.title, payload.content)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return PostRead.model_validate(post)


@router.get("/posts/my", response_model=list[PostRead])
async def list_my_posts(
    session: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> list[PostRead]:
    posts = await post_service.list_mine(session, identity)
    return [PostRead.model_validate(post) for post in posts]
