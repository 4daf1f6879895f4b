"""
Conversion between HTML text and the element tree.
"""

from .html_to_tree import HtmlToTreeConverter, parse_html
from .tree_to_html import TreeToHtmlConverter, render_indent

__all__ = ["HtmlToTreeConverter", "parse_html", "TreeToHtmlConverter", "render_indent"]
