from enum import Enum

# Column defaults. Status, priority and role are free text at the schema
# level; these are only the values a row gets when none is supplied.
DEFAULT_TASK_STATUS = "pending"
DEFAULT_TASK_PRIORITY = "medium"
DEFAULT_MEMBER_ROLE = "member"


class DbStatus(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"

    @classmethod
    def from_bool(cls, ok: bool) -> "DbStatus":
        return cls.CONNECTED if ok else cls.DISCONNECTED
