"""Pydantic schemas for posts."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from postboard.schemas.common import UtcDatetime


class PostCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


class PostRead(BaseModel):
    id: int
    title: str
    content: str
    author_username: str
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
