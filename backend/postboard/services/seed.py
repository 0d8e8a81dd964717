"""Demo data inserted on first startup when no users exist."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from postboard.db.session import transaction
from postboard.models.post import Post
from postboard.services.users import count_users, create_user

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {"username": "admin", "password": "admin123", "email": "admin@example.com", "full_name": "Admin User", "role": "ADMIN"},
    {"username": "john", "password": "password123", "email": "john@example.com", "full_name": "John Doe", "role": "USER"},
    {"username": "jane", "password": "password123", "email": "jane@example.com", "full_name": "Jane Smith", "role": "USER"},
]

DEMO_POSTS = [
    (
        "admin",
        "Welcome to Postboard",
        "This is the first post in our new API. It is served by FastAPI with JWT authentication.",
    ),
    ("john", "Getting Started with FastAPI", "FastAPI dependencies make authentication and authorization easy to compose."),
    ("jane", "Understanding JWT Tokens", "JSON Web Tokens are a compact way to securely transmit information between parties."),
    ("john", "PostgreSQL with Docker", "Using Docker to run PostgreSQL makes database management much easier."),
]


async def seed_demo_data(session: AsyncSession) -> bool:
    """Insert demo users and posts if the user table is empty.

    Returns ``True`` when data was written.
    """

    if await count_users(session) > 0:
        return False

    logger.info("Initializing demo data...")
    async with transaction(session):
        users = {}
        for demo in DEMO_USERS:
            user = await create_user(session, **demo)
            users[user.username] = user
        for username, title, content in DEMO_POSTS:
            session.add(Post(title=title, content=content, author=users[username]))

    logger.info("Demo users created: %s", ", ".join(f"{u['username']} ({u['role']})" for u in DEMO_USERS))
    return True
