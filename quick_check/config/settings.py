from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Tool-wide settings loaded from environment variables.

    Every field can be overridden with a ``QUICK_CHECK_`` prefixed variable,
    e.g. ``QUICK_CHECK_DEBUG=true``. Per-project settings (the base branch)
    live in the YAML config file instead, see ``load_project_config``.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUICK_CHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Base branch candidates, tried in order when none is configured
    DEFAULT_BASE_BRANCHES: List[str] = ["main", "master"]
    REMOTE_NAME: str = "origin"
    CONFIG_FILE_NAME: str = ".quick_check.yml"

    # Development and debugging
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()


def config_file_paths(
    working_dir: Path, repo_root: Optional[Path], file_name: str
) -> List[Path]:
    """Candidate config locations: working directory first, then repo root."""
    paths = [working_dir / file_name]
    if repo_root is not None and repo_root / file_name not in paths:
        paths.append(repo_root / file_name)
    return paths


def load_project_config(paths: Iterable[Path]) -> Optional[Dict[str, Any]]:
    """Return the first config file that parses to a mapping.

    Missing, unreadable or malformed files are skipped.
    """
    for path in paths:
        if not path.is_file():
            continue
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError):
            continue
        if isinstance(data, dict):
            return data
    return None
