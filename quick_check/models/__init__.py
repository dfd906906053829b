"""Models for the application."""

from .command_runner import CommandRunner
from .file_system import LocalFileSystem
from .git_manager import GitManager, NotAGitRepositoryError
from .test_resolver import TestResolver

__all__ = [
    "CommandRunner",
    "GitManager",
    "LocalFileSystem",
    "NotAGitRepositoryError",
    "TestResolver",
]
