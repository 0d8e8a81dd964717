"""Authentication-related schemas."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("username", mode="before")
    @classmethod
    def _strip_username(cls, value: Any) -> Any:
        return _strip(value)


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=1, max_length=128)
    email: EmailStr
    full_name: str = Field(..., min_length=1, max_length=128)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Length limits apply to the stripped value; passwords are left untouched.
    @field_validator("username", "full_name", mode="before")
    @classmethod
    def _strip_names(cls, value: Any) -> Any:
        return _strip(value)


class LoginResponse(BaseModel):
    token: str
    type: str = "Bearer"
    username: str
    email: str
    role: str
