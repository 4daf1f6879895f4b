"""
Tests for editors, the session and persisted session state.
"""

import pytest

from html_cli.session.editor import Editor
from html_cli.session.file_handler import FileHandler
from html_cli.session.session import Session
from html_cli.session.state_manager import SessionStateManager


@pytest.fixture
def files(tmp_path):
    return FileHandler(tmp_path / "files")


class TestFileHandler:
    def test_write_creates_directories(self, files):
        files.write_text("a/b/doc.html", "<html></html>")
        assert files.exists("a/b/doc.html")
        assert files.read_text("a/b/doc.html") == "<html></html>"

    def test_read_missing(self, files):
        with pytest.raises(FileNotFoundError):
            files.read_text("missing.html")

    def test_directory_is_not_a_file(self, files):
        (files.base_dir / "sub").mkdir(parents=True)
        assert not files.exists("sub")


class TestEditor:
    def test_new_file_is_created_and_dirty(self, files):
        editor = Editor("new.html", files)
        assert files.exists("new.html")
        assert editor.is_dirty
        assert editor.html_editor.root.body.children == []

    def test_existing_file_is_loaded_clean(self, files):
        files.write_text("doc.html", '<html>\n<body>\n<p id="a">text</p>\n</body>\n</html>')
        editor = Editor("doc.html", files)
        assert not editor.is_dirty
        assert editor.html_editor.root.find_by_id("a").content == "text"
        assert not editor.html_editor.history.can_undo

    def test_save_writes_indented_html(self, files):
        editor = Editor("doc.html", files, indent_size=2)
        editor.html_editor.append("p", "a", "body", "hi")
        editor.save()
        assert not editor.is_dirty
        assert '    <p id="a">hi</p>' in files.read_text("doc.html").splitlines()


class TestSession:
    def test_add_makes_active(self, files):
        session = Session()
        first = Editor("one.html", files)
        second = Editor("two.html", files)
        session.add_editor(first)
        session.add_editor(second)
        assert session.active_editor is second
        assert session.get_editor_by_file_path("one.html") is first
        assert session.get_editor_by_file_path("three.html") is None

    def test_remove_active_falls_back_to_first(self, files):
        session = Session()
        editors = [Editor(name, files) for name in ("a.html", "b.html", "c.html")]
        for editor in editors:
            session.add_editor(editor)
        session.remove_editor(editors[2])
        assert session.active_editor is editors[0]

    def test_remove_last(self, files):
        session = Session()
        editor = Editor("a.html", files)
        session.add_editor(editor)
        session.remove_editor(editor)
        assert session.active_editor is None


class TestSessionStateManager:
    def test_missing_state_gives_empty_session(self, tmp_path, files):
        session = SessionStateManager(tmp_path / "state", files).load_session()
        assert session.editors == []
        assert session.active_editor is None

    def test_save_and_restore(self, tmp_path, files):
        manager = SessionStateManager(tmp_path / "state", files)
        session = Session()
        session.add_editor(Editor("a.html", files))
        session.add_editor(Editor("b.html", files, show_id=False))
        session.active_editor = session.editors[0]
        manager.save_session(session)

        restored = manager.load_session()
        assert [e.file_path for e in restored.editors] == ["a.html", "b.html"]
        assert restored.active_editor.file_path == "a.html"
        assert restored.editors[1].show_id is False

    def test_restored_editors_use_configured_indent(self, tmp_path, files):
        session = Session()
        session.add_editor(Editor("a.html", files))
        SessionStateManager(tmp_path / "state", files).save_session(session)

        restored = SessionStateManager(tmp_path / "state", files, indent_size=2).load_session()
        editor = restored.active_editor
        assert editor.indent_size == 2
        editor.html_editor.append("p", "p1", "body", "text")
        editor.save()
        assert '    <p id="p1">text</p>' in files.read_text("a.html").splitlines()

    def test_state_file_location(self, tmp_path, files):
        manager = SessionStateManager(tmp_path / "state", files)
        manager.save_session(Session())
        assert (tmp_path / "state" / "session_state.json").exists()

    def test_corrupt_state_is_ignored(self, tmp_path, files):
        state_dir = tmp_path / "state"
        state_dir.mkdir()
        (state_dir / "session_state.json").write_text("{not json")
        session = SessionStateManager(state_dir, files).load_session()
        assert session.editors == []
