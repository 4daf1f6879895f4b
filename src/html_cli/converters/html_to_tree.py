"""
Converter from line-oriented HTML text to the element tree.

The accepted dialect is the one ``TreeToHtmlConverter`` writes: one tag per
line, with the element's text on the same line. Anything that does not look
like a tag line is skipped; parsing never fails.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..core.document_model import (
    LIST_CONTAINER_TAGS,
    GenericElement,
    HTMLElement,
    Html,
    create_element,
)

_TAG_NAME = re.compile(r"^<\s*/?\s*([^\s>/]+)")
_ID_ATTRIBUTE = re.compile(r'(?:^|\s)id="([^"]*)"')


class HtmlToTreeConverter:
    """
    Builds an ``Html`` tree from serialized text using an open-element stack.

    The stack is seeded with the synthetic root. ``html`` lines only carry the
    root's text, ``head`` and ``body`` lines resolve to the root's existing
    singletons (taking their text) and ``title`` lines only set the title text.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def convert(self, content: str) -> Html:
        """
        Parse ``content`` into a new document tree.

        A closing tag pops only when it names the element on top of the
        stack, and a line that closes its own tag is never pushed, so
        consecutive one-line elements stay siblings.
        """
        root = Html()
        stack: List[HTMLElement] = [root]

        for number, raw_line in enumerate(content.splitlines(), start=1):
            line = raw_line.strip()
            if not line:
                continue

            if not (line.startswith("<") and ">" in line):
                # Free-standing text is not attached to any element.
                self.logger.debug(f"Skipping non-tag line {number}: {line[:40]!r}")
                continue

            if line.startswith("</"):
                closing = self._extract_tag_name(line)
                if len(stack) > 1 and (closing or "").lower() == stack[-1].tag_name.lower():
                    stack.pop()
                else:
                    self.logger.debug(f"Ignoring unmatched closing tag on line {number}: {line[:40]!r}")
                continue

            tag_name = self._extract_tag_name(line)
            if tag_name is None:
                self.logger.debug(f"Skipping unreadable tag on line {number}: {line[:40]!r}")
                continue

            lowered = tag_name.lower()
            if lowered == "html":
                root.content = self._extract_content(line)
                continue

            if lowered == "title":
                root.head.set_title(self._extract_content(line))
                continue

            self_closing = line.endswith("/>")

            if lowered in ("head", "body"):
                element = root.head if lowered == "head" else root.body
                element.content = self._extract_content(line)
                if not self_closing and not self._closes_inline(line, tag_name):
                    stack.append(element)
                continue

            element_id = self._extract_attribute(line, "id")
            element_content = self._extract_content(line)

            if lowered in LIST_CONTAINER_TAGS:
                element = GenericElement(tag_name, element_id, element_content)
            else:
                element = create_element(tag_name, element_id, element_content)

            stack[-1].add_child(element)

            if self_closing or lowered in LIST_CONTAINER_TAGS or self._closes_inline(line, tag_name):
                continue
            stack.append(element)

        return root

    def _extract_tag_name(self, line: str) -> Optional[str]:
        match = _TAG_NAME.match(line)
        return match.group(1) if match else None

    def _extract_attribute(self, line: str, attribute: str) -> str:
        if attribute == "id":
            match = _ID_ATTRIBUTE.search(line)
        else:
            match = re.search(rf'(?:^|\s){re.escape(attribute)}="([^"]*)"', line)
        return match.group(1) if match else ""

    def _extract_content(self, line: str) -> str:
        """Text between the first ``>`` and the last ``</`` (or end of line)."""
        if line.endswith("/>"):
            return ""

        start = line.index(">") + 1
        end = line.rfind("</")
        if end == -1:
            return line[start:].strip()
        if end > start:
            return line[start:end].strip()
        return ""

    def _closes_inline(self, line: str, tag_name: str) -> bool:
        """True when the line ends with the element's own closing tag."""
        return re.search(rf"</\s*{re.escape(tag_name)}\s*>$", line, re.IGNORECASE) is not None


def parse_html(content: str) -> Html:
    """Parse serialized document text into a tree."""
    return HtmlToTreeConverter().convert(content)
