"""
Tree and indent views of the documents folder.

Files open in the session are marked with ``*`` when they have unsaved
changes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Sequence

from ..core.tree_printer import TreePrinter
from .editor import Editor

logger = logging.getLogger(__name__)


class FileSystemNode:
    """A file or directory, shaped for ``TreePrinter``."""

    def __init__(self, path: Path, base_dir: Path, dirty_files: Dict[str, bool]):
        self.path = path
        self.relative_path = path.relative_to(base_dir).as_posix() if path != base_dir else "."
        self.is_directory = path.is_dir()
        self.name = path.name or str(path)
        self.is_dirty = dirty_files.get(self.relative_path, False)
        self.children: List[FileSystemNode] = []

        if self.is_directory:
            try:
                entries = sorted(path.iterdir())
            except OSError as e:
                logger.warning(f"Cannot list directory {path}: {e}")
                entries = []
            directories = [p for p in entries if p.is_dir()]
            files = [p for p in entries if not p.is_dir()]
            self.children = [FileSystemNode(p, base_dir, dirty_files) for p in directories + files]

    def output_label(self, show_id: bool) -> str:
        if self.is_directory:
            return f"{self.name}/"
        return f"{self.name}*" if self.is_dirty else self.name


def _root_node(base_dir: Path, open_editors: Sequence[Editor]) -> FileSystemNode:
    dirty_files = {Path(e.file_path).as_posix(): e.is_dirty for e in open_editors}
    return FileSystemNode(base_dir, base_dir, dirty_files)


def print_dir_tree(base_dir: Path, open_editors: Sequence[Editor]) -> str:
    """Connector-drawn tree of ``base_dir``."""
    root = _root_node(base_dir, open_editors)
    return TreePrinter(show_id=False, use_symbols=True).print(root)


def print_dir_indent(base_dir: Path, open_editors: Sequence[Editor], indent: int = 4) -> str:
    """Space-indented tree of ``base_dir``."""
    root = _root_node(base_dir, open_editors)
    return TreePrinter(show_id=False, use_symbols=False, indent_size=indent).print(root)
