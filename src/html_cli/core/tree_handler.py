"""
Tree handler for validated manipulation of the element tree.

Every operation checks all of its preconditions before touching the tree,
so a failed call leaves the tree exactly as it was.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional

from .document_model import RESERVED_TAGS, HTMLElement, Html, create_element
from .errors import DuplicateIdError, ElementNotFoundError, ReservedTagError


@dataclass
class EditResult:
    """Outcome of a successful tree operation."""
    success: bool
    description: str
    element_id: Optional[str] = None


class TreeHandler:
    """
    Handles lookup and mutation of an ``Html`` tree.

    The handler holds no state besides the root it operates on; after an
    undo/redo the caller simply builds a new handler for the new root.
    """

    def __init__(self, root: Html):
        self.root = root
        self.logger = logging.getLogger(__name__)

    def find_by_id(self, element_id: str) -> Optional[HTMLElement]:
        """Find an element by its ID."""
        return self.root.find_by_id(element_id)

    def require(self, element_id: str) -> HTMLElement:
        """Find an element by its ID or raise ``ElementNotFoundError``."""
        element = self.root.find_by_id(element_id)
        if element is None:
            raise ElementNotFoundError(element_id)
        return element

    def _check_new_element(self, tag_name: str, new_id: str) -> None:
        if tag_name.lower() in RESERVED_TAGS:
            raise ReservedTagError(tag_name)
        if self.root.find_by_id(new_id) is not None:
            raise DuplicateIdError(new_id)

    def insert_before(
        self,
        tag_name: str,
        new_id: str,
        anchor_id: str,
        content: str = "",
    ) -> EditResult:
        """
        Insert a new element immediately before the anchor element.

        Args:
            tag_name: Tag of the new element
            new_id: ID of the new element, unique across the tree
            anchor_id: ID of the sibling to insert before
            content: Text content of the new element

        Returns:
            EditResult describing the insertion
        """
        anchor = self.require(anchor_id)
        parent = anchor.parent
        if parent is None:
            raise ElementNotFoundError(anchor_id, f"Cannot insert before the root element '{anchor_id}'.")
        # head and body stay the first two children of the root
        if anchor is self.root.head or anchor is self.root.body:
            raise ReservedTagError(anchor.tag_name)
        self._check_new_element(tag_name, new_id)

        element = create_element(tag_name, new_id, content)
        parent.insert_child(parent.children.index(anchor), element)

        self.logger.info(f"Inserted <{tag_name}> '{new_id}' before '{anchor_id}'")
        return EditResult(
            success=True,
            description=f"Element '{new_id}' inserted before '{anchor_id}'.",
            element_id=new_id,
        )

    def append_child(
        self,
        tag_name: str,
        new_id: str,
        parent_id: str,
        content: str = "",
    ) -> EditResult:
        """
        Append a new element as the last child of the parent element.

        Args:
            tag_name: Tag of the new element
            new_id: ID of the new element, unique across the tree
            parent_id: ID of the element to append to
            content: Text content of the new element

        Returns:
            EditResult describing the append
        """
        parent = self.require(parent_id)
        self._check_new_element(tag_name, new_id)

        parent.add_child(create_element(tag_name, new_id, content))

        self.logger.info(f"Appended <{tag_name}> '{new_id}' to '{parent_id}'")
        return EditResult(
            success=True,
            description=f"Element '{new_id}' appended to '{parent_id}'.",
            element_id=new_id,
        )

    def rename_id(self, old_id: str, new_id: str) -> EditResult:
        """Change the ID of an element. Renaming to the same ID is a no-op."""
        element = self.require(old_id)
        if element.is_reserved:
            raise ReservedTagError(element.tag_name)
        if new_id == old_id:
            return EditResult(success=True, description="ID unchanged.", element_id=old_id)
        if self.root.find_by_id(new_id) is not None:
            raise DuplicateIdError(new_id)

        element.id = new_id

        self.logger.info(f"Renamed '{old_id}' to '{new_id}'")
        return EditResult(
            success=True,
            description=f"ID of element '{old_id}' changed to '{new_id}'.",
            element_id=new_id,
        )

    def edit_text(self, element_id: str, new_content: str) -> EditResult:
        """Overwrite the text content of an element."""
        element = self.require(element_id)
        element.content = new_content

        self.logger.info(f"Updated text of '{element_id}'")
        return EditResult(
            success=True,
            description=f"Text of element '{element_id}' updated.",
            element_id=element_id,
        )

    def delete(self, element_id: str) -> EditResult:
        """Remove an element together with its whole subtree."""
        element = self.require(element_id)
        parent = element.parent
        if parent is None:
            raise ElementNotFoundError(element_id, f"Cannot delete the root element '{element_id}'.")
        if element.is_reserved:
            raise ReservedTagError(element.tag_name)

        parent.remove_child(element)

        self.logger.info(f"Deleted '{element_id}' from '{parent.id}'")
        return EditResult(
            success=True,
            description=f"Element '{element_id}' deleted.",
            element_id=element_id,
        )

    def validate_structure(self) -> List[str]:
        """Validate the tree invariants and return any issues."""
        issues = []

        if self.root.id != "html":
            issues.append(f"Root element has id '{self.root.id}', expected 'html'")

        first_two = [child.id for child in self.root.children[:2]]
        if first_two != ["head", "body"]:
            issues.append(f"Root children start with {first_two}, expected ['head', 'body']")
        if self.root.head is None or self.root.head is not self.root.find_by_id("head"):
            issues.append("Head reference does not point at the 'head' element")
        if self.root.body is None or self.root.body is not self.root.find_by_id("body"):
            issues.append("Body reference does not point at the 'body' element")

        titles = [e for e in self.root.depth_first() if e.tag_name == "title"]
        if len(titles) > 1:
            issues.append(f"Document has {len(titles)} title elements")
        if self.root.head is not None and titles and titles[0] is not self.root.head.title:
            issues.append("Title element is not the head's title")

        for element_id, count in Counter(self.root.ids()).items():
            if count > 1:
                issues.append(f"ID '{element_id}' is used by {count} elements")

        for element in self.root.depth_first():
            for child in element.children:
                if child.parent is not element:
                    issues.append(f"Element '{child.id}' has a stale parent reference")

        return issues
