"""File system protocol interface."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class FileSystemProtocol(Protocol):
    """Read-only file system queries, relative to the repository root."""

    def is_file(self, path: str) -> bool:
        """Return True if ``path`` is an existing regular file."""
        ...

    def is_executable(self, path: str) -> bool:
        """Return True if ``path`` is an executable file."""
        ...

    def read_text(self, path: str) -> Optional[str]:
        """Contents of ``path``, or None if it cannot be read."""
        ...
