"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postboard.api import api_router, auth_router
from postboard.core.config import get_settings
from postboard.core.errors import register_exception_handlers
from postboard.db.base import Base
from postboard.db.session import dispose_engine, get_engine, get_session
from postboard.models import Post, User  # noqa: F401  registers tables on Base.metadata
from postboard.services.seed import seed_demo_data

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    current = get_settings()
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if current.seed_demo_data:
        async with get_session() as session:
            if await seed_demo_data(session):
                logger.info("Demo data initialized")

    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(api_router)
