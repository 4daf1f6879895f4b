"""
Tests for the LanguageTool spell checker, using a mock transport.
"""

import asyncio
from urllib.parse import parse_qs

import httpx

from html_cli.config import SpellCheckConfig
from html_cli.core.document_model import Html
from html_cli.core.tree_handler import TreeHandler
from html_cli.spelling.spell_checker import NO_ERRORS_MESSAGE, SpellChecker


def _match(text, offset, length, category="Spelling", replacements=("Hello",)):
    return {
        "message": "Possible spelling mistake found.",
        "context": {"text": text, "offset": offset, "length": length},
        "replacements": [{"value": value} for value in replacements],
        "rule": {"id": "MORFOLOGIK_RULE_EN_US", "category": {"id": "TYPOS", "name": category}},
    }


def _language_tool(request: httpx.Request) -> httpx.Response:
    form = parse_qs(request.content.decode())
    text = form["text"][0]
    if "Helo" in text:
        return httpx.Response(200, json={"matches": [_match(text, text.index("Helo"), 4)]})
    if "grammar" in text:
        return httpx.Response(200, json={"matches": [_match(text, 0, 7, category="Grammar")]})
    return httpx.Response(200, json={"matches": []})


def _check(root, handler=_language_tool, config=None):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await SpellChecker(config, client).check(root)
    return asyncio.run(run())


def _document():
    root = Html()
    handler = TreeHandler(root)
    handler.append_child("p", "good", "body", "All fine here")
    handler.append_child("p", "bad", "body", "Helo world")
    return root


class TestSpellChecker:
    def test_clean_document(self):
        root = Html()
        TreeHandler(root).append_child("p", "p1", "body", "Nothing wrong")
        assert _check(root) == NO_ERRORS_MESSAGE
        assert not root.find_by_id("p1").is_spell_error

    def test_report_and_flags(self):
        root = _document()
        report = _check(root)

        assert "Element 'bad' - Misspelled word: 'Helo'" in report
        assert "Context: 'Helo world'" in report
        assert "Position: Offset 0, Length 4" in report
        assert "Suggestions: Hello" in report
        assert root.find_by_id("bad").is_spell_error
        assert not root.find_by_id("good").is_spell_error

    def test_sends_form_fields(self):
        seen = []

        def handler(request):
            seen.append(parse_qs(request.content.decode()))
            return httpx.Response(200, json={"matches": []})

        root = Html()
        TreeHandler(root).append_child("p", "p1", "body", "Some text")
        _check(root, handler, SpellCheckConfig(language="en-US"))
        assert seen == [{"text": ["Some text"], "language": ["en-US"]}]

    def test_other_categories_ignored(self):
        root = Html()
        TreeHandler(root).append_child("p", "p1", "body", "grammar issue")
        assert _check(root) == NO_ERRORS_MESSAGE

    def test_flags_refreshed_on_next_check(self):
        root = _document()
        _check(root)
        root.find_by_id("bad").content = "Hello world"
        _check(root)
        assert not root.find_by_id("bad").is_spell_error

    def test_service_error_is_not_fatal(self):
        def failing(request):
            return httpx.Response(503)

        root = _document()
        assert _check(root, failing) == NO_ERRORS_MESSAGE
        assert not root.find_by_id("bad").is_spell_error

    def test_invalid_json_is_not_fatal(self):
        def garbage(request):
            return httpx.Response(200, content=b"not json")

        assert _check(_document(), garbage) == NO_ERRORS_MESSAGE

    def test_suggestions_are_capped(self):
        def many(request):
            text = parse_qs(request.content.decode())["text"][0]
            return httpx.Response(200, json={"matches": [_match(text, 0, 4, replacements=list("abcdef"))]})

        root = Html()
        TreeHandler(root).append_child("p", "p1", "body", "Helo")
        report = _check(root, many, SpellCheckConfig(max_suggestions=3))
        assert "Suggestions: a, b, c\n" in report

    def test_no_suggestions(self):
        def bare(request):
            text = parse_qs(request.content.decode())["text"][0]
            return httpx.Response(200, json={"matches": [_match(text, 0, 4, replacements=())]})

        root = Html()
        TreeHandler(root).append_child("p", "p1", "body", "Helo")
        assert "Suggestions: No suggestions available" in _check(root, bare)
