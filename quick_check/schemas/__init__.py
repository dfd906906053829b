"""Schemas for the application."""

from .conventions import CONVENTIONS, Framework, TestConvention
from .git import RUNNABLE_STATUSES, FileChange, FileStatus, diff_filter
from .run import ChangeSourceFlags, ResolvedTests, RunContext, RunOptions

__all__ = [
    "CONVENTIONS",
    "ChangeSourceFlags",
    "FileChange",
    "FileStatus",
    "Framework",
    "RUNNABLE_STATUSES",
    "ResolvedTests",
    "RunContext",
    "RunOptions",
    "TestConvention",
    "diff_filter",
]
