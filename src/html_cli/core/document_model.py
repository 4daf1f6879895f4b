"""
Core document model: the HTML element tree.

Every open document is a tree rooted at an ``Html`` element whose first two
children are the ``Head`` and ``Body`` singletons. Children are owned by
their parent; the parent link is a weak reference used only for navigating
upwards and detaching.
"""

from __future__ import annotations

import weakref
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional


RESERVED_TAGS = frozenset({"html", "head", "body", "title"})

# Tags kept as leaves by the parser (no nested structure on later lines).
LIST_CONTAINER_TAGS = frozenset({"ul", "ol"})

_NO_PARENT = lambda: None


class ElementKind(Enum):
    """Closed set of element kinds."""
    HTML = "html"
    HEAD = "head"
    BODY = "body"
    TITLE = "title"
    DIV = "div"
    PARAGRAPH = "p"
    HEADER = "header"
    GENERIC = "generic"


class HTMLElement:
    """
    Base class for all elements in the document tree.

    Subclasses fix the tag name and carry kind-specific fields. The shared
    contract is identity (``id``), free text (``content``), ordered
    ``children`` and the weak ``parent`` reference.
    """

    kind: ElementKind = ElementKind.GENERIC

    def __init__(self, tag_name: str, id: str = "", content: str = ""):
        self._tag_name = tag_name
        self.id = id
        self.content = content
        self.children: List[HTMLElement] = []
        self.is_spell_error = False
        self._parent = _NO_PARENT

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._tag_name}#{self.id} ({len(self.children)} children)>"

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def parent(self) -> Optional[HTMLElement]:
        """The parent element or None; uses a weak reference."""
        return self._parent()

    @property
    def is_reserved(self) -> bool:
        """True for html, head, body and title, which never show an id."""
        return self._tag_name in RESERVED_TAGS

    def add_child(self, child: HTMLElement) -> HTMLElement:
        """Append a child, becoming its parent, and return it."""
        self.insert_child(len(self.children), child)
        return child

    def insert_child(self, index: int, child: HTMLElement) -> None:
        """Insert a child at ``index``, becoming its parent."""
        if child.parent is not None:
            child.parent.remove_child(child)
        child._parent = weakref.ref(self)
        self.children.insert(index, child)
        self._bind(child)

    def remove_child(self, child: HTMLElement) -> None:
        """Detach a child (and with it its whole subtree)."""
        self.children.remove(child)
        child._parent = _NO_PARENT
        self._unbind(child)

    def _bind(self, child: HTMLElement) -> None:
        """Hook for kinds that keep named references to singleton children."""

    def _unbind(self, child: HTMLElement) -> None:
        """Counterpart of ``_bind`` when a child is removed."""

    def depth_first(self) -> Iterator[HTMLElement]:
        """Yield self, then all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.depth_first()

    def find_by_id(self, element_id: str) -> Optional[HTMLElement]:
        """Find an element by its ID, starting from this element."""
        if not element_id:
            return None
        for element in self.depth_first():
            if element.id == element_id:
                return element
        return None

    def ids(self) -> List[str]:
        """All ids in the subtree, in document order (empty ids skipped)."""
        return [element.id for element in self.depth_first() if element.id]

    def _spawn(self) -> HTMLElement:
        """Create a childless element of the same kind with the same fields."""
        return type(self)(self.id, self.content)

    def clone(self) -> HTMLElement:
        """Return a structurally independent deep copy of this subtree."""
        copied = self._spawn()
        copied.is_spell_error = self.is_spell_error
        for child in self.children:
            copied.add_child(child.clone())
        return copied

    def output_label(self, show_id: bool) -> str:
        """Label used by the tree printer: the tag, optionally with ``#id``."""
        if self.is_reserved or not show_id or not self.id:
            return self._tag_name
        return f"{self._tag_name}#{self.id}"


class Title(HTMLElement):
    """The document title; always a leaf inside ``Head``."""

    kind = ElementKind.TITLE

    def __init__(self, id: str = "title", content: str = ""):
        super().__init__("title", id, content)


class Head(HTMLElement):
    """The head element; owns the single ``Title``."""

    kind = ElementKind.HEAD

    def __init__(self, id: str = "head", content: str = "", populate: bool = True):
        self.title: Optional[Title] = None
        super().__init__("head", id, content)
        if populate:
            self.add_child(Title())

    def _bind(self, child: HTMLElement) -> None:
        if isinstance(child, Title) and self.title is None:
            self.title = child

    def _unbind(self, child: HTMLElement) -> None:
        if child is self.title:
            self.title = None

    def _spawn(self) -> HTMLElement:
        return Head(self.id, self.content, populate=False)

    def set_title(self, content: str) -> None:
        """Set the title text, creating the title element if it is missing."""
        if self.title is None:
            self.add_child(Title(content=content))
        else:
            self.title.content = content


class Body(HTMLElement):
    """The body element."""

    kind = ElementKind.BODY

    def __init__(self, id: str = "body", content: str = ""):
        super().__init__("body", id, content)


class Html(HTMLElement):
    """The document root. Creates its own ``Head`` and ``Body``."""

    kind = ElementKind.HTML

    def __init__(self, id: str = "html", content: str = "", populate: bool = True):
        self.head: Optional[Head] = None
        self.body: Optional[Body] = None
        super().__init__("html", id, content)
        if populate:
            self.add_child(Head())
            self.add_child(Body())

    def _bind(self, child: HTMLElement) -> None:
        if isinstance(child, Head) and self.head is None:
            self.head = child
        elif isinstance(child, Body) and self.body is None:
            self.body = child

    def _unbind(self, child: HTMLElement) -> None:
        if child is self.head:
            self.head = None
        elif child is self.body:
            self.body = None

    def _spawn(self) -> HTMLElement:
        return Html(self.id, self.content, populate=False)


class Div(HTMLElement):
    kind = ElementKind.DIV

    def __init__(self, id: str = "", content: str = ""):
        super().__init__("div", id, content)


class Paragraph(HTMLElement):
    kind = ElementKind.PARAGRAPH

    def __init__(self, id: str = "", content: str = ""):
        super().__init__("p", id, content)


class Header(HTMLElement):
    """A heading; the level is the digit in ``h1``, ``h2``, ``h3``."""

    kind = ElementKind.HEADER

    def __init__(self, id: str = "", content: str = "", level: int = 1):
        self.level = level
        super().__init__(f"h{level}", id, content)

    def _spawn(self) -> HTMLElement:
        return Header(self.id, self.content, self.level)


class GenericElement(HTMLElement):
    """Any tag without a dedicated kind; keeps the literal tag string."""

    kind = ElementKind.GENERIC

    def __init__(self, tag_name: str, id: str = "", content: str = ""):
        super().__init__(tag_name, id, content)

    def _spawn(self) -> HTMLElement:
        return GenericElement(self.tag_name, self.id, self.content)


def _header_factory(tag_name: str) -> Callable[[str, str], HTMLElement]:
    level = int(tag_name[1:])
    return lambda id, content: Header(id, content, level)


TAG_TABLE: Dict[str, Callable[[str, str], HTMLElement]] = {
    "div": Div,
    "p": Paragraph,
    "h1": _header_factory("h1"),
    "h2": _header_factory("h2"),
    "h3": _header_factory("h3"),
    "title": Title,
}


def create_element(tag_name: str, id: str = "", content: str = "") -> HTMLElement:
    """Create an element for ``tag_name``, falling back to ``GenericElement``."""
    factory = TAG_TABLE.get(tag_name.lower())
    if factory is None:
        return GenericElement(tag_name, id, content)
    return factory(id, content)
