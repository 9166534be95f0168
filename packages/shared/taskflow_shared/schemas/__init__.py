from .common import (  # noqa: F401
    DEFAULT_MEMBER_ROLE,
    DEFAULT_TASK_PRIORITY,
    DEFAULT_TASK_STATUS,
    DbStatus,
)
from .system import HealthRead, WelcomeRead  # noqa: F401
