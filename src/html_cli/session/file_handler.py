"""
File access relative to the documents folder.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class FileHandler:
    """Reads and writes files below ``base_dir``."""

    def __init__(self, base_dir: Union[str, Path] = "files"):
        self.base_dir = Path(base_dir)

    def full_path(self, file_path: Union[str, Path]) -> Path:
        return self.base_dir / file_path

    def exists(self, file_path: Union[str, Path]) -> bool:
        return self.full_path(file_path).is_file()

    def read_text(self, file_path: Union[str, Path]) -> str:
        full_path = self.full_path(file_path)
        if not full_path.is_file():
            raise FileNotFoundError(f"File '{file_path}' does not exist.")
        return full_path.read_text(encoding="utf-8")

    def write_text(self, file_path: Union[str, Path], content: str) -> None:
        """Write ``content``, creating missing directories."""
        full_path = self.full_path(file_path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
