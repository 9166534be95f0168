"""Workspace model: the container that owns tasks and members."""

from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import IntIdMixin, TimestampMixin


class Workspace(IntIdMixin, TimestampMixin, SQLModel, table=True):
    __tablename__ = "workspaces"

    name: str = Field(max_length=255, nullable=False)
    description: Optional[str] = Field(default=None, sa_type=sa.Text)
    created_by_id: Optional[int] = Field(default=None, foreign_key="users.id")
