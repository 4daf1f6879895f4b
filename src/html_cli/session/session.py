"""
The set of open editors and which one is active.
"""

from __future__ import annotations

from typing import List, Optional

from .editor import Editor


class Session:
    """Open editors in the order they were opened, plus the active one."""

    def __init__(self):
        self.editors: List[Editor] = []
        self.active_editor: Optional[Editor] = None

    def get_editor_by_file_path(self, file_path: str) -> Optional[Editor]:
        for editor in self.editors:
            if editor.file_path == file_path:
                return editor
        return None

    def add_editor(self, editor: Editor) -> None:
        """Add an editor and make it active."""
        self.editors.append(editor)
        self.active_editor = editor

    def remove_editor(self, editor: Editor) -> None:
        """Remove an editor; if it was active, the first remaining one becomes active."""
        self.editors.remove(editor)
        if self.active_editor is editor:
            self.active_editor = self.editors[0] if self.editors else None
