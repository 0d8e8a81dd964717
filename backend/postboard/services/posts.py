"""Post queries and creation, always scoped by an explicit caller identity."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from postboard.core.security import Identity
from postboard.db.session import transaction
from postboard.models.post import Post
from postboard.models.user import User
from postboard.services.users import require_user


def _newest_first():
    return (
        select(Post)
        .options(selectinload(Post.author))
        .order_by(Post.created_at.desc(), Post.id.desc())
    )


async def list_all(session: AsyncSession) -> list[Post]:
    result = await session.execute(_newest_first())
    return list(result.scalars().all())


async def list_mine(session: AsyncSession, identity: Identity) -> list[Post]:
    result = await session.execute(
        _newest_first().join(Post.author).where(User.username == identity.username)
    )
    return list(result.scalars().all())


async def create_post(session: AsyncSession, identity: Identity, title: str, content: str) -> Post:
    async with transaction(session):
        author = await require_user(session, identity.username)
        post = Post(title=title, content=content, author=author)
        session.add(post)
        await session.flush()
    return post
