"""
Core document handling and representation modules.
"""

from .errors import (
    HtmlEditorError,
    ElementNotFoundError,
    DuplicateIdError,
    ReservedTagError,
    NothingToUndoError,
    NothingToRedoError,
)
from .document_model import HTMLElement, Html, Head, Body, Title, create_element
from .tree_handler import TreeHandler, EditResult
from .tree_printer import TreePrinter, print_tree

__all__ = [
    "HtmlEditorError",
    "ElementNotFoundError",
    "DuplicateIdError",
    "ReservedTagError",
    "NothingToUndoError",
    "NothingToRedoError",
    "HTMLElement",
    "Html",
    "Head",
    "Body",
    "Title",
    "create_element",
    "TreeHandler",
    "EditResult",
    "TreePrinter",
    "print_tree",
]
