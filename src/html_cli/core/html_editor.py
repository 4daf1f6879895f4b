"""
Per-document editing facade.

``HtmlEditor`` owns the live tree of one document together with its history.
Every successful mutation is followed by a snapshot, and undo/redo replace
the live tree wholesale with the snapshot handed back by the history.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..converters.html_to_tree import HtmlToTreeConverter
from ..converters.tree_to_html import TreeToHtmlConverter
from ..spelling.spell_checker import SpellChecker
from ..version.history_manager import HistoryManager
from .document_model import Html
from .tree_handler import EditResult, TreeHandler
from .tree_printer import TreePrinter


class HtmlEditor:
    """Editing, rendering and history for one HTML document."""

    def __init__(self, history: Optional[HistoryManager] = None):
        self.root = Html()
        self.history = history or HistoryManager()
        self.logger = logging.getLogger(__name__)

    def init(self) -> None:
        """Start a new empty document and record it as the initial state."""
        self.root = Html()
        self.history.save_state(self.root, "Initialize document")

    def load_text(self, content: str) -> None:
        """Replace the document with the parsed ``content``."""
        self.root = HtmlToTreeConverter().convert(content)
        self.history.save_state(self.root, "Load document")

    def read(self, path: Path) -> None:
        """Load ``path``; a missing file gives a new empty document."""
        if not path.exists():
            self.logger.info(f"{path} does not exist, starting an empty document")
            self.init()
            return
        self.load_text(path.read_text(encoding="utf-8"))

    def save(self, path: Path, indent_size: int = 4) -> None:
        """Write the nested-indent rendering to ``path``."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.print_indent(indent_size), encoding="utf-8")

    def _commit(self, result: EditResult) -> EditResult:
        self.history.save_state(self.root, result.description)
        return result

    def insert(self, tag_name: str, element_id: str, insert_location: str, text_content: str = "") -> EditResult:
        """Insert a new element before the element ``insert_location``."""
        return self._commit(TreeHandler(self.root).insert_before(tag_name, element_id, insert_location, text_content))

    def append(self, tag_name: str, element_id: str, parent_id: str, text_content: str = "") -> EditResult:
        """Append a new element to the element ``parent_id``."""
        return self._commit(TreeHandler(self.root).append_child(tag_name, element_id, parent_id, text_content))

    def edit_id(self, old_id: str, new_id: str) -> EditResult:
        return self._commit(TreeHandler(self.root).rename_id(old_id, new_id))

    def edit_text(self, element_id: str, new_text_content: str) -> EditResult:
        return self._commit(TreeHandler(self.root).edit_text(element_id, new_text_content))

    def delete(self, element_id: str) -> EditResult:
        return self._commit(TreeHandler(self.root).delete(element_id))

    def undo(self) -> None:
        self.root = self.history.undo()

    def redo(self) -> None:
        self.root = self.history.redo()

    def print_tree(
        self,
        show_id: bool = True,
        mark_error: bool = False,
        use_symbols: bool = True,
        indent_size: int = 2,
    ) -> str:
        """Decorated tree view of the document."""
        return TreePrinter(show_id, mark_error, use_symbols, indent_size).print(self.root)

    def print_indent(self, indent_size: int = 4) -> str:
        """Nested-indent HTML of the document."""
        return TreeToHtmlConverter(indent_size).convert(self.root)

    async def spell_check(self, checker: Optional[SpellChecker] = None) -> str:
        """Run the spell checker over the document, refreshing the error flags."""
        return await (checker or SpellChecker()).check(self.root)
