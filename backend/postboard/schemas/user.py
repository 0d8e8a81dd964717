"""Pydantic schemas for user operations."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from postboard.schemas.common import UtcDatetime


class UserRead(BaseModel):
    id: int
    username: str
    email: str
    full_name: str
    role: str
    created_at: UtcDatetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
