"""
Decorated tree rendering for interactive inspection.

Works on any node object exposing ``children`` and ``output_label(show_id)``;
``content`` and ``is_spell_error`` are used when present. The document tree
and the directory view both render through here.
"""

from __future__ import annotations

from typing import Any, List

ERROR_MARKER = "[X] "

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


class TreePrinter:
    """
    Renders a tree depth-first, pre-order, one node per line.

    With ``use_symbols`` the hierarchy is drawn with branch connectors,
    otherwise every level is indented by ``indent_size`` spaces. Non-empty
    node content is shown as an extra leaf line directly under its node,
    before the node's real children.
    """

    def __init__(
        self,
        show_id: bool = True,
        mark_error: bool = False,
        use_symbols: bool = True,
        indent_size: int = 2,
    ):
        self.show_id = show_id
        self.mark_error = mark_error
        self.use_symbols = use_symbols
        self.indent_size = indent_size

    def print(self, root: Any) -> str:
        """Return the rendering of ``root`` and its subtree."""
        lines: List[str] = [self._label(root)]

        content = getattr(root, "content", "")
        if content:
            lines.append(self._leaf("", self._marked(root, content)))

        children = list(root.children)
        for index, child in enumerate(children):
            self._print_node(child, "", index == len(children) - 1, lines)

        return "\n".join(lines) + "\n"

    def _marked(self, node: Any, text: str) -> str:
        if self.mark_error and getattr(node, "is_spell_error", False):
            return ERROR_MARKER + text
        return text

    def _label(self, node: Any) -> str:
        return self._marked(node, node.output_label(self.show_id))

    def _leaf(self, prefix: str, text: str) -> str:
        if self.use_symbols:
            return f"{prefix}{LAST_BRANCH}{text}"
        return f"{prefix}{' ' * self.indent_size}{text}"

    def _print_node(self, node: Any, prefix: str, is_last: bool, lines: List[str]) -> None:
        if self.use_symbols:
            lines.append(f"{prefix}{LAST_BRANCH if is_last else BRANCH}{self._label(node)}")
            child_prefix = prefix + (SPACE if is_last else PIPE)
        else:
            lines.append(f"{prefix}{' ' * self.indent_size}{self._label(node)}")
            child_prefix = prefix + " " * self.indent_size

        content = getattr(node, "content", "")
        if content:
            lines.append(self._leaf(child_prefix, self._marked(node, content)))

        children = list(node.children)
        for index, child in enumerate(children):
            self._print_node(child, child_prefix, index == len(children) - 1, lines)


def print_tree(
    root: Any,
    show_id: bool = True,
    mark_error: bool = False,
    use_symbols: bool = True,
    indent_size: int = 2,
) -> str:
    """Render ``root`` in decorated-tree mode."""
    return TreePrinter(show_id, mark_error, use_symbols, indent_size).print(root)
