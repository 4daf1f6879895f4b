"""
An open document: its file, its ``HtmlEditor`` and its display settings.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.html_editor import HtmlEditor
from .file_handler import FileHandler


class Editor:
    """
    Binds one file to one ``HtmlEditor``.

    Opening a file that does not exist creates it with an empty document and
    leaves the editor dirty.
    """

    def __init__(
        self,
        file_path: str,
        file_handler: Optional[FileHandler] = None,
        show_id: bool = True,
        indent_size: int = 4,
    ):
        self.file_path = file_path
        self.file_handler = file_handler or FileHandler()
        self.html_editor = HtmlEditor()
        self.show_id = show_id
        self.indent_size = indent_size
        self.is_dirty = False
        self.logger = logging.getLogger(__name__)

        if self.file_handler.exists(file_path):
            self.html_editor.load_text(self.file_handler.read_text(file_path))
        else:
            self.logger.info(f"File not found: {file_path}. Initializing empty document.")
            self.html_editor.init()
            self.save()
            self.is_dirty = True

    def save(self) -> None:
        """Write the document to its file."""
        self.file_handler.write_text(self.file_path, self.html_editor.print_indent(self.indent_size))
        self.is_dirty = False
