"""
Tests for parsing serialized documents.
"""

import pytest

from html_cli.converters.html_to_tree import parse_html
from html_cli.converters.tree_to_html import render_indent
from html_cli.core.document_model import GenericElement, Header, Html, Paragraph
from html_cli.core.tree_handler import TreeHandler


SAMPLE = """<html>
    <head>
        <title>My Page</title>
    </head>
    <body>
        <h1 id="top">Welcome</h1>
        <div id="main">
            <p id="p1">First</p>
            <p id="p2">Second</p>
        </div>
    </body>
</html>"""


class TestParse:
    def test_structure(self):
        root = parse_html(SAMPLE)
        assert root.head.title.content == "My Page"
        assert [child.id for child in root.body.children] == ["top", "main"]
        assert [child.id for child in root.find_by_id("main").children] == ["p1", "p2"]

    def test_kinds(self):
        root = parse_html(SAMPLE)
        assert isinstance(root.find_by_id("top"), Header)
        assert isinstance(root.find_by_id("p1"), Paragraph)

    def test_singletons_not_duplicated(self):
        root = parse_html(SAMPLE)
        assert len(root.children) == 2
        assert len(root.head.children) == 1
        assert TreeHandler(root).validate_structure() == []

    def test_empty_input(self):
        assert parse_html("").ids() == Html().ids()

    def test_free_text_dropped(self):
        root = parse_html("<body>\n  <p id=\"a\">kept</p>\n  loose text\n</body>")
        assert root.find_by_id("a").content == "kept"
        assert "loose" not in render_indent(root)

    def test_unmatched_closing_tag_ignored(self):
        root = parse_html("<body>\n</div>\n<p id=\"a\">x</p>\n</body>")
        assert root.find_by_id("a").parent is root.body

    def test_list_container_is_leaf(self):
        text = '<body>\n<ul id="list">\n<li id="item">one</li>\n</ul>\n</body>'
        root = parse_html(text)
        assert isinstance(root.find_by_id("list"), GenericElement)
        assert root.find_by_id("list").children == []
        assert root.find_by_id("item").parent is root.body

    def test_self_closing(self):
        root = parse_html('<body>\n<br id="b"/>\n<p id="after">x</p>\n</body>')
        assert root.find_by_id("b").content == ""
        assert root.find_by_id("after").parent is root.body

    def test_content_before_children(self):
        root = parse_html('<body>\n<div id="d">intro\n<p id="c">x</p>\n</div>\n</body>')
        assert root.find_by_id("d").content == "intro"
        assert root.find_by_id("c").parent is root.find_by_id("d")


class TestRoundTrip:
    @pytest.mark.parametrize("indent", [0, 2, 4])
    def test_render_parse_render(self, indent):
        root = Html()
        handler = TreeHandler(root)
        handler.edit_text("title", "Title text")
        handler.append_child("div", "d1", "body", "outer text")
        handler.append_child("h2", "h", "d1", "Heading")
        handler.append_child("p", "p1", "d1", "para")
        handler.append_child("section", "s", "body")
        handler.append_child("span", "", "s", "anonymous")

        text = render_indent(root, indent)
        assert render_indent(parse_html(text), indent) == text

    def test_singleton_text_survives(self):
        root = Html()
        handler = TreeHandler(root)
        handler.edit_text("html", "root text")
        handler.edit_text("head", "head text")
        handler.edit_text("body", "intro")
        handler.append_child("p", "p1", "body", "para")

        parsed = parse_html(render_indent(root))
        assert parsed.content == "root text"
        assert parsed.head.content == "head text"
        assert parsed.body.content == "intro"
        assert parsed.find_by_id("p1").parent is parsed.body
        assert render_indent(parsed) == render_indent(root)

    def test_childless_body_text_survives(self):
        root = Html()
        TreeHandler(root).edit_text("body", "only text")
        assert parse_html(render_indent(root)).body.content == "only text"
