"""Base mixins for SQLModel tables."""

from datetime import datetime, timezone
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

# Renders as now() on PostgreSQL and as a constant default on SQLite.
SERVER_NOW = sa.text("CURRENT_TIMESTAMP")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def timestamp_field(**sa_kwargs):
    return Field(
        default_factory=_utcnow,
        nullable=False,
        sa_column_kwargs={"server_default": SERVER_NOW, **sa_kwargs},
        sa_type=sa.DateTime(timezone=True),
    )


class TimestampMixin(SQLModel):
    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field(onupdate=_utcnow)


class IntIdMixin(SQLModel):
    id: Optional[int] = Field(default=None, primary_key=True)
