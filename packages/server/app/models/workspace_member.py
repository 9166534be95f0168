"""Workspace membership. (workspace_id, user_id) is not unique."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from taskflow_shared.schemas.common import DEFAULT_MEMBER_ROLE

from .base import IntIdMixin, timestamp_field


class WorkspaceMember(IntIdMixin, SQLModel, table=True):
    __tablename__ = "workspace_members"

    workspace_id: int = Field(
        foreign_key="workspaces.id", ondelete="CASCADE", nullable=False, index=True
    )
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    role: str = Field(
        default=DEFAULT_MEMBER_ROLE,
        max_length=50,
        nullable=False,
        sa_column_kwargs={"server_default": DEFAULT_MEMBER_ROLE},
    )
    joined_at: datetime = timestamp_field()
