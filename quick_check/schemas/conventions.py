"""Test-file conventions understood by quick-check."""

import re
from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict


class Framework(str, Enum):
    """Supported test frameworks."""

    RSPEC = "rspec"
    MINITEST = "minitest"


class TestConvention(BaseModel):
    """Naming, layout and execution policy of one test framework."""

    # Keep pytest from collecting this model as a test class.
    __test__ = False

    model_config = ConfigDict(frozen=True)

    framework: Framework
    test_root: str
    suffix: str
    extension: str = ".rb"
    request_dir: str
    batched: bool

    @property
    def test_pattern(self) -> "re.Pattern[str]":
        return re.compile(
            r"\A{root}/.+{suffix}{ext}\Z".format(
                root=re.escape(self.test_root),
                suffix=re.escape(self.suffix),
                ext=re.escape(self.extension),
            )
        )

    def is_test_path(self, path: str) -> bool:
        return bool(self.test_pattern.match(path))

    def test_path(self, *parts: str) -> str:
        """Join ``parts`` under the test root and append suffix + extension."""
        return "/".join((self.test_root,) + parts) + self.suffix + self.extension


CONVENTIONS: Dict[Framework, TestConvention] = {
    Framework.RSPEC: TestConvention(
        framework=Framework.RSPEC,
        test_root="spec",
        suffix="_spec",
        request_dir="requests",
        batched=True,
    ),
    Framework.MINITEST: TestConvention(
        framework=Framework.MINITEST,
        test_root="test",
        suffix="_test",
        request_dir="integration",
        batched=False,
    ),
}
