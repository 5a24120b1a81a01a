"""Plan step kinds for zaptouch."""

from __future__ import annotations

from enum import Enum


class FileOperationKind(str, Enum):
    """What happens to the file's existence/content (exactly one per Action)."""

    SKIP = "SKIP"
    CREATE_EMPTY = "CREATE_EMPTY"
    CREATE_WITH_TEMPLATE = "CREATE_WITH_TEMPLATE"
    OVERWRITE_WITH_TEMPLATE = "OVERWRITE_WITH_TEMPLATE"
    NONE = "NONE"


class TimeOperationKind(str, Enum):
    """What happens to the file's timestamps (zero or more per Action)."""

    SET_TIMES = "SET_TIMES"
    ADJUST_TIMES = "ADJUST_TIMES"


CREATING_KINDS: frozenset[FileOperationKind] = frozenset(
    {
        FileOperationKind.CREATE_EMPTY,
        FileOperationKind.CREATE_WITH_TEMPLATE,
        FileOperationKind.OVERWRITE_WITH_TEMPLATE,
    }
)

TEMPLATE_KINDS: frozenset[FileOperationKind] = frozenset(
    {
        FileOperationKind.CREATE_WITH_TEMPLATE,
        FileOperationKind.OVERWRITE_WITH_TEMPLATE,
    }
)
