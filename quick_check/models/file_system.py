import os
from pathlib import Path
from typing import Optional


class LocalFileSystem:
    """File system queries resolved against a base directory."""

    def __init__(self, base_path: Path):
        self.base_path = Path(base_path)

    def _resolve(self, path: str) -> Path:
        return self.base_path / path

    def is_file(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def is_executable(self, path: str) -> bool:
        full_path = self._resolve(path)
        return full_path.is_file() and os.access(full_path, os.X_OK)

    def read_text(self, path: str) -> Optional[str]:
        try:
            return self._resolve(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None
