"""Uniform error body returned for every failed request."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    status: int
    message: str
    timestamp: datetime
    path: str
