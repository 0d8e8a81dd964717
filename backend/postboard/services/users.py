"""User service functions for lookups and persistence."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.exceptions import UserNotFoundError
from postboard.core.security import PasswordHasher
from postboard.models.user import User


async def get_user_by_username(session: AsyncSession, username: str) -> User | None:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def require_user(session: AsyncSession, username: str) -> User:
    user = await get_user_by_username(session, username)
    if user is None:
        raise UserNotFoundError(username)
    return user


async def username_exists(session: AsyncSession, username: str) -> bool:
    result = await session.execute(select(User.id).where(User.username == username))
    return result.first() is not None


async def email_exists(session: AsyncSession, email: str) -> bool:
    result = await session.execute(select(User.id).where(User.email == email))
    return result.first() is not None


async def list_users(session: AsyncSession) -> list[User]:
    result = await session.execute(select(User).order_by(User.id))
    return list(result.scalars().all())


async def count_users(session: AsyncSession) -> int:
    result = await session.execute(select(func.count(User.id)))
    return result.scalar_one()


async def create_user(
    session: AsyncSession,
    *,
    username: str,
    password: str,
    email: str,
    full_name: str,
    role: str = "USER",
) -> User:
    """Add a user with a freshly hashed password and flush it to get an id.

    Committing is left to the caller's transaction.
    """

    user = User(
        username=username,
        password_hash=PasswordHasher.hash(password),
        email=email,
        full_name=full_name,
        role=role,
        is_active=True,
    )
    session.add(user)
    await session.flush()
    return user


async def authenticate_user(session: AsyncSession, username: str, password: str) -> User | None:
    user = await get_user_by_username(session, username)
    if not user:
        return None
    if not PasswordHasher.verify(password, user.password_hash):
        return None
    if not user.is_active:
        return None
    return user
