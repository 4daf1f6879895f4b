"""
Tests for the documents folder views.
"""

import pytest

from html_cli.session.dir_printer import print_dir_indent, print_dir_tree
from html_cli.session.editor import Editor
from html_cli.session.file_handler import FileHandler


@pytest.fixture
def files(tmp_path):
    base = tmp_path / "files"
    (base / "sub").mkdir(parents=True)
    (base / "b.html").write_text("<html></html>")
    (base / "a.html").write_text("<html></html>")
    (base / "sub" / "c.html").write_text("<html></html>")
    return FileHandler(base)


class TestDirTree:
    def test_directories_first_then_sorted_files(self, files):
        assert print_dir_tree(files.base_dir, []) == (
            "files/\n"
            "├── sub/\n"
            "│   └── c.html\n"
            "├── a.html\n"
            "└── b.html\n"
        )

    def test_dirty_files_are_starred(self, files):
        editor = Editor("sub/c.html", files)
        editor.is_dirty = True
        output = print_dir_tree(files.base_dir, [editor])
        assert "│   └── c.html*" in output.splitlines()
        assert "a.html*" not in output

    def test_indent_view(self, files):
        assert print_dir_indent(files.base_dir, [], 2).splitlines() == [
            "files/",
            "  sub/",
            "    c.html",
            "  a.html",
            "  b.html",
        ]
