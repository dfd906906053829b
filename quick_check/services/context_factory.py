"""Builds the explicit per-run context."""

from pathlib import Path
from typing import Optional

from quick_check.config.settings import Settings, config_file_paths, load_project_config
from quick_check.console import debug
from quick_check.models import NotAGitRepositoryError
from quick_check.protocols import GitManagerProtocol
from quick_check.schemas import RunContext


def resolve_base_branch(
    explicit: Optional[str],
    git_manager: GitManagerProtocol,
    settings: Settings,
    working_dir: Path,
    repo_root: Optional[Path],
) -> str:
    """
    Resolve the base branch to diff against.

    Order: explicit option, then ``base_branch`` from the project config file,
    then the first default candidate found locally or on the remote, then the
    first default candidate. Never fails, the result may not exist.
    """
    if explicit and explicit.strip():
        return explicit.strip()

    config = load_project_config(
        config_file_paths(working_dir, repo_root, settings.CONFIG_FILE_NAME)
    )
    if config:
        configured = config.get("base_branch")
        if isinstance(configured, str) and configured.strip():
            return configured.strip()

    for candidate in settings.DEFAULT_BASE_BRANCHES:
        if git_manager.local_branch_exists(candidate) or git_manager.remote_branch_exists(
            candidate
        ):
            return candidate
    return settings.DEFAULT_BASE_BRANCHES[0] if settings.DEFAULT_BASE_BRANCHES else "main"


def create_run_context(
    git_manager: GitManagerProtocol,
    settings: Settings,
    working_dir: Path,
    base_branch: Optional[str] = None,
    verbose: bool = False,
) -> RunContext:
    """
    Create the RunContext for one invocation.

    Raises:
        NotAGitRepositoryError: if ``working_dir`` is not in a git work tree.
    """
    if not git_manager.is_work_tree():
        raise NotAGitRepositoryError(str(working_dir))

    repo_root = git_manager.repo_root() or working_dir
    resolved = resolve_base_branch(
        base_branch, git_manager, settings, working_dir, repo_root
    )
    debug(f"Repository root: {repo_root}", verbose)
    debug(f"Base branch: {resolved}", verbose)
    return RunContext(working_dir=working_dir, repo_root=repo_root, base_branch=resolved)
