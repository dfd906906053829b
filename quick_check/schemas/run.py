"""Per-invocation option, context and result models."""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .conventions import Framework


class ChangeSourceFlags(BaseModel):
    """Which change sources the collector should query."""

    model_config = ConfigDict(frozen=True)

    include_unstaged: bool = True
    include_staged: bool = True
    include_committed: bool = True


class RunOptions(BaseModel):
    """Options for a single ``qc`` invocation."""

    model_config = ConfigDict(frozen=True)

    base_branch: Optional[str] = None
    sources: ChangeSourceFlags = Field(default_factory=ChangeSourceFlags)
    custom_command: Optional[List[str]] = None
    print_only: bool = False
    dry_run: bool = False
    verbose: bool = False


class RunContext(BaseModel):
    """Explicit environment shared by every component of a run."""

    model_config = ConfigDict(frozen=True)

    working_dir: Path
    repo_root: Path
    base_branch: str


class ResolvedTests(BaseModel):
    """Test files to run, one ordered list per convention."""

    rspec: List[str] = Field(default_factory=list)
    minitest: List[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.rspec and not self.minitest

    def files_for(self, framework: Framework) -> List[str]:
        return getattr(self, framework.value)

    def all_paths(self) -> List[str]:
        return self.rspec + self.minitest
