# SQLModel definitions, imported here to ensure metadata is populated for Alembic.
from .base import IntIdMixin, TimestampMixin  # noqa: F401
from .user import User  # noqa: F401
from .workspace import Workspace  # noqa: F401
from .workspace_member import WorkspaceMember  # noqa: F401
from .task import Task  # noqa: F401
from .comment import Comment  # noqa: F401
