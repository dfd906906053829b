"""Git Manager protocol interface."""

from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable

from ..schemas import FileChange


@runtime_checkable
class GitManagerProtocol(Protocol):
    """Protocol for the git queries quick-check needs."""

    @property
    def local_path(self) -> Path:
        """Directory the repository is queried from."""
        ...

    @property
    def remote_name(self) -> str:
        """Remote consulted when a branch is missing locally."""
        ...

    def is_work_tree(self) -> bool:
        """Return True if local_path is inside a git working tree."""
        ...

    def current_branch(self) -> Optional[str]:
        """Name of the checked-out branch, or None if it cannot be read."""
        ...

    def repo_root(self) -> Optional[Path]:
        """Top-level directory of the working tree."""
        ...

    def local_branch_exists(self, name: str) -> bool:
        """Return True if refs/heads/<name> exists."""
        ...

    def remote_branch_exists(self, name: str) -> bool:
        """Return True if the remote advertises a head named <name>."""
        ...

    def get_changed_files(
        self, cached: bool = False, ref_range: Optional[str] = None
    ) -> List[FileChange]:
        """Added/copied/modified/renamed files, with rename detection."""
        ...

    def get_untracked_files(self) -> List[str]:
        """Untracked files not excluded by .gitignore."""
        ...
