"""Task comment model."""

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import IntIdMixin, TimestampMixin


class Comment(IntIdMixin, TimestampMixin, SQLModel, table=True):
    __tablename__ = "comments"

    content: str = Field(sa_type=sa.Text, nullable=False)
    task_id: int = Field(foreign_key="tasks.id", ondelete="CASCADE", nullable=False, index=True)
    user_id: int = Field(foreign_key="users.id", nullable=False)
