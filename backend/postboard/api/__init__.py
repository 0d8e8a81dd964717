"""API router aggregator."""
from fastapi import APIRouter

from postboard.api.routes import auth, posts, users

api_router = APIRouter(prefix="/api")
api_router.include_router(posts.router)
api_router.include_router(users.router)

auth_router = auth.router

__all__ = ["api_router", "auth_router"]
