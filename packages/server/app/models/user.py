"""User model."""

from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import IntIdMixin, TimestampMixin


class User(IntIdMixin, TimestampMixin, SQLModel, table=True):
    __tablename__ = "users"

    name: str = Field(max_length=255, nullable=False)
    email: str = Field(max_length=255, nullable=False, unique=True, index=True)
    password_hash: Optional[str] = Field(default=None, sa_type=sa.Text)  # bcrypt
