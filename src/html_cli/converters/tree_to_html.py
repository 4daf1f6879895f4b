"""
Converter from the element tree to indented HTML text.

This is the persisted form of a document; ``HtmlToTreeConverter`` reads it
back regardless of the indent width used to write it.
"""

from __future__ import annotations

from typing import List

from ..core.document_model import HTMLElement


class TreeToHtmlConverter:
    """
    Serializes an element tree as nested, indented HTML.

    Each element opens on its own line as ``<tag id="...">content``. A
    childless element closes on the same line; an element with children
    closes on a separate line at its own indentation.
    """

    def __init__(self, indent_size: int = 4):
        self.indent_size = indent_size

    def convert(self, root: HTMLElement) -> str:
        """Render ``root`` and its subtree. The result has no trailing newline."""
        lines: List[str] = []
        self._render(root, 0, lines)
        return "\n".join(lines)

    def _open_tag(self, element: HTMLElement) -> str:
        if element.is_reserved or not element.id:
            return f"<{element.tag_name}>"
        return f'<{element.tag_name} id="{element.id}">'

    def _render(self, element: HTMLElement, level: int, lines: List[str]) -> None:
        indent = " " * (level * self.indent_size)
        opening = f"{indent}{self._open_tag(element)}{element.content}"

        if not element.children:
            lines.append(f"{opening}</{element.tag_name}>")
            return

        lines.append(opening)
        for child in element.children:
            self._render(child, level + 1, lines)
        lines.append(f"{indent}</{element.tag_name}>")


def render_indent(root: HTMLElement, indent_size: int = 4) -> str:
    """Render ``root`` in nested-indent mode."""
    return TreeToHtmlConverter(indent_size).convert(root)
