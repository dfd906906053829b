from enum import Enum
from typing import Optional

from pydantic import BaseModel


class FileStatus(str, Enum):
    """Enum for file change statuses reported by git diff."""

    ADDED = "A"
    COPIED = "C"
    MODIFIED = "M"
    RENAMED = "R"
    DELETED = "D"


# Deleted files are never requested, so removed tests are never scheduled.
RUNNABLE_STATUSES = (
    FileStatus.ADDED,
    FileStatus.COPIED,
    FileStatus.MODIFIED,
    FileStatus.RENAMED,
)


def diff_filter(statuses=RUNNABLE_STATUSES) -> str:
    """Build a ``--diff-filter`` value such as ``ACMR``."""
    return "".join(status.value for status in statuses)


class FileChange(BaseModel):
    """Represents a file change detected by git diff."""

    status: FileStatus
    file_path: str
    old_file_path: Optional[str] = None  # For renamed/copied files
