"""Declarative base shared by all ORM models."""
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    """Timezone-aware current time used for column defaults."""

    return datetime.now(timezone.utc)
