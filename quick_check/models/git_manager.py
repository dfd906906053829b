from pathlib import Path
from typing import List, Optional

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from ..console import debug
from ..schemas import FileChange, FileStatus, diff_filter


class NotAGitRepositoryError(RuntimeError):
    """Raised when quick-check runs outside a git working tree."""


class GitManager:
    """Runs the git queries quick-check needs against a local working tree."""

    def __init__(
        self,
        local_path: str,
        remote_name: str = "origin",
        verbose: bool = False,
    ):
        self.local_path = Path(local_path)
        self.remote_name = remote_name
        self.verbose = verbose
        self.repo: Optional[Repo] = None

    def _open(self) -> Repo:
        if self.repo is None:
            try:
                self.repo = Repo(self.local_path, search_parent_directories=True)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise NotAGitRepositoryError(str(self.local_path)) from e
        return self.repo

    def is_work_tree(self) -> bool:
        try:
            output = self._open().git.rev_parse("--is-inside-work-tree")
        except NotAGitRepositoryError:
            return False
        except GitCommandError as e:
            debug(f"Failed to check work tree: {e}", self.verbose)
            return False
        return output.strip() == "true"

    def current_branch(self) -> Optional[str]:
        try:
            return self._open().git.rev_parse("--abbrev-ref", "HEAD").strip()
        except GitCommandError as e:
            debug(f"Failed to read current branch: {e}", self.verbose)
            return None

    def repo_root(self) -> Optional[Path]:
        try:
            root = self._open().working_tree_dir
        except NotAGitRepositoryError:
            return None
        return Path(root) if root else None

    def local_branch_exists(self, name: str) -> bool:
        try:
            self._open().git.show_ref("--verify", "--quiet", f"refs/heads/{name}")
        except GitCommandError:
            return False
        return True

    def remote_branch_exists(self, name: str) -> bool:
        try:
            output = self._open().git.ls_remote("--heads", self.remote_name, name)
        except GitCommandError as e:
            debug(f"Failed to query {self.remote_name} for {name}: {e}", self.verbose)
            return False
        return bool(output.strip())

    def get_changed_files(
        self, cached: bool = False, ref_range: Optional[str] = None
    ) -> List[FileChange]:
        """Get added, copied, modified and renamed files.

        Without ``cached`` or ``ref_range`` this compares the working tree
        with the index. Renames and copies report their destination path.
        Returns an empty list if git fails.
        """
        args = ["--name-status", "-z", "-M", "-C", f"--diff-filter={diff_filter()}"]
        if cached:
            args.append("--cached")
        if ref_range:
            args.append(ref_range)

        try:
            output = self._open().git.diff(*args)
        except GitCommandError as e:
            debug(f"Failed to get changed files ({' '.join(args)}): {e}", self.verbose)
            return []

        return parse_name_status(output)

    def get_untracked_files(self) -> List[str]:
        try:
            output = self._open().git.ls_files("--others", "--exclude-standard", "-z")
        except GitCommandError as e:
            debug(f"Failed to list untracked files: {e}", self.verbose)
            return []
        return [path for path in output.split("\0") if path.strip()]


def parse_name_status(output: str) -> List[FileChange]:
    """Parse ``git diff --name-status -z`` output.

    Entries are ``STATUS NUL PATH`` or, for renames and copies,
    ``STATUS NUL OLD NUL NEW`` where STATUS carries a similarity score.
    """
    fields = output.split("\0")
    changes = []
    i = 0
    while i < len(fields):
        code = fields[i].strip()
        i += 1
        if not code:
            continue
        status = FileStatus(code[0])
        if status in (FileStatus.RENAMED, FileStatus.COPIED):
            old_path, new_path = fields[i], fields[i + 1]
            i += 2
            changes.append(
                FileChange(status=status, file_path=new_path, old_file_path=old_path)
            )
        else:
            changes.append(FileChange(status=status, file_path=fields[i]))
            i += 1
    return changes
