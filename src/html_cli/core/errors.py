"""
Errors raised by document tree operations and the history manager.
"""

from __future__ import annotations


class HtmlEditorError(Exception):
    """Base class for all editing failures reported to the caller."""


class ElementNotFoundError(HtmlEditorError):
    """Referenced id does not exist, or the target is the document root."""

    def __init__(self, element_id: str, message: str = ""):
        self.element_id = element_id
        super().__init__(message or f"Element '{element_id}' not found.")


class DuplicateIdError(HtmlEditorError):
    """Requested id is already present somewhere in the tree."""

    def __init__(self, element_id: str):
        self.element_id = element_id
        super().__init__(f"Element with ID '{element_id}' already exists in the tree.")


class ReservedTagError(HtmlEditorError):
    """Attempt to create another html/head/body/title element."""

    def __init__(self, tag_name: str):
        self.tag_name = tag_name
        super().__init__(f"Tag '{tag_name}' is reserved and cannot be created.")


class NothingToUndoError(HtmlEditorError):
    """Only the current state is left on the undo stack."""

    def __init__(self):
        super().__init__("No actions to undo.")


class NothingToRedoError(HtmlEditorError):
    """The redo stack is empty."""

    def __init__(self):
        super().__init__("No actions to redo.")
