"""
Tests for undo/redo history.
"""

import pytest

from html_cli.converters.tree_to_html import render_indent
from html_cli.core.document_model import Html
from html_cli.core.errors import ElementNotFoundError, NothingToRedoError, NothingToUndoError
from html_cli.core.html_editor import HtmlEditor
from html_cli.version.history_manager import HistoryManager


@pytest.fixture
def editor():
    editor = HtmlEditor()
    editor.init()
    return editor


class TestHistoryManager:
    def test_single_state_cannot_undo(self):
        history = HistoryManager()
        history.save_state(Html(), "Initial")
        assert not history.can_undo
        with pytest.raises(NothingToUndoError, match="No actions to undo"):
            history.undo()

    def test_redo_without_undo(self):
        history = HistoryManager()
        history.save_state(Html())
        with pytest.raises(NothingToRedoError, match="No actions to redo"):
            history.redo()

    def test_snapshots_are_independent(self):
        history = HistoryManager()
        root = Html()
        history.save_state(root, "Initial")
        root.body.content = "changed"
        history.save_state(root, "Changed")

        restored = history.undo()
        assert restored.body.content == ""
        restored.body.content = "mutated after undo"
        assert history.redo().body.content == "changed"

    def test_save_clears_redo(self):
        history = HistoryManager()
        history.save_state(Html())
        history.save_state(Html())
        history.undo()
        assert history.can_redo
        history.save_state(Html())
        assert not history.can_redo

    def test_depths_and_history_order(self):
        history = HistoryManager()
        for description in ["one", "two", "three"]:
            history.save_state(Html(), description)
        history.undo()
        assert history.undo_depth == 1
        assert history.redo_depth == 1
        assert [s.description for s in history.get_history()] == ["two", "one"]


class TestEditorHistory:
    def test_fresh_document_cannot_undo(self, editor):
        with pytest.raises(NothingToUndoError):
            editor.undo()

    def test_undo_redo_text_edit(self, editor):
        editor.append("p", "x", "body", "old")
        editor.edit_text("x", "new")

        editor.undo()
        assert editor.root.find_by_id("x").content == "old"
        editor.redo()
        assert editor.root.find_by_id("x").content == "new"

    def test_undo_then_redo_restores_rendering(self, editor):
        editor.append("div", "d", "body", "text")
        editor.append("p", "p", "d", "inner")
        expected = editor.print_indent()

        editor.undo()
        editor.undo()
        assert editor.print_indent() == render_indent(Html())
        editor.redo()
        editor.redo()
        assert editor.print_indent() == expected

    def test_failed_edit_adds_no_state(self, editor):
        with pytest.raises(ElementNotFoundError):
            editor.delete("ghost")
        assert not editor.history.can_undo

    def test_undo_after_new_edit_has_no_redo(self, editor):
        editor.append("p", "a", "body")
        editor.undo()
        editor.append("p", "b", "body")
        with pytest.raises(NothingToRedoError):
            editor.redo()

    def test_restored_tree_is_editable(self, editor):
        editor.append("div", "d", "body")
        editor.append("p", "p", "d")
        editor.undo()
        editor.append("p", "q", "d", "after undo")
        assert editor.root.find_by_id("q").parent is editor.root.find_by_id("d")
        assert editor.root.find_by_id("p") is None
