"""System endpoint schemas (welcome + health)."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from .common import DbStatus

WELCOME_MESSAGE = "Welcome to TaskFlow API"


class WelcomeRead(BaseModel):
    message: str = WELCOME_MESSAGE


class HealthRead(BaseModel):
    """Liveness payload. `status` is always "ok"; `db` carries the real signal."""
    status: Literal["ok"] = "ok"
    timestamp: datetime
    db: DbStatus
