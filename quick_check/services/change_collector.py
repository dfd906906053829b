"""Collects changed paths from the working tree, the index and the branch."""

from typing import List, Optional

from quick_check.console import debug
from quick_check.models import NotAGitRepositoryError
from quick_check.models.test_resolver import unique
from quick_check.protocols import GitManagerProtocol
from quick_check.schemas import ChangeSourceFlags


class ChangeCollector:
    """Gathers changed paths from every enabled change source."""

    def __init__(self, git_manager: GitManagerProtocol, verbose: bool = False):
        self.git_manager = git_manager
        self.verbose = verbose

    def collect(self, flags: ChangeSourceFlags, base_branch: Optional[str]) -> List[str]:
        if not self.git_manager.is_work_tree():
            raise NotAGitRepositoryError(str(self.git_manager.local_path))

        files: List[str] = []

        if flags.include_unstaged:
            files.extend(self._paths())
            files.extend(self.git_manager.get_untracked_files())

        if flags.include_staged:
            files.extend(self._paths(cached=True))

        if flags.include_committed:
            ref_range = self.committed_range(base_branch)
            if ref_range:
                files.extend(self._paths(ref_range=ref_range))

        files = unique(path.strip() for path in files)
        debug(f"Changed files: {files}", self.verbose)
        return files

    def committed_range(self, base_branch: Optional[str]) -> Optional[str]:
        """Symmetric range from the base branch to HEAD, if it applies.

        Returns None on the base branch itself or when the base branch exists
        neither locally nor on the remote.
        """
        current = self.git_manager.current_branch()
        if not current or not base_branch or current == base_branch:
            return None
        if self.git_manager.local_branch_exists(base_branch):
            return f"{base_branch}...HEAD"
        if self.git_manager.remote_branch_exists(base_branch):
            return f"{self.git_manager.remote_name}/{base_branch}...HEAD"
        debug(f"Base branch {base_branch} not found, skipping committed changes", self.verbose)
        return None

    def _paths(self, cached: bool = False, ref_range: Optional[str] = None) -> List[str]:
        changes = self.git_manager.get_changed_files(cached=cached, ref_range=ref_range)
        return [change.file_path for change in changes]
