"""Task model."""

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from taskflow_shared.schemas.common import DEFAULT_TASK_PRIORITY, DEFAULT_TASK_STATUS

from .base import IntIdMixin, TimestampMixin


class Task(IntIdMixin, TimestampMixin, SQLModel, table=True):
    __tablename__ = "tasks"

    title: str = Field(max_length=255, nullable=False)
    description: Optional[str] = Field(default=None, sa_type=sa.Text)
    # Free text; no enumeration at the schema level.
    status: str = Field(
        default=DEFAULT_TASK_STATUS,
        max_length=50,
        nullable=False,
        sa_column_kwargs={"server_default": DEFAULT_TASK_STATUS},
    )
    priority: Optional[str] = Field(
        default=DEFAULT_TASK_PRIORITY,
        max_length=50,
        sa_column_kwargs={"server_default": DEFAULT_TASK_PRIORITY},
    )
    due_date: Optional[datetime] = Field(default=None, sa_type=sa.DateTime(timezone=True))
    workspace_id: int = Field(
        foreign_key="workspaces.id", ondelete="CASCADE", nullable=False, index=True
    )
    assignee_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)
    created_by_id: int = Field(foreign_key="users.id", nullable=False)
