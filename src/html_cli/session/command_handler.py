"""
Text command dispatch for the interactive editor.

Each command line is ``<command> <arguments>``; arguments are separated by
spaces and may be grouped with double quotes. Every command returns a
message string; failures come back as ``"Error: ..."`` instead of raising.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Awaitable, Callable, Dict, List, Optional, Set

from ..config import HtmlCLIConfig
from ..core.errors import HtmlEditorError
from ..spelling.spell_checker import SpellChecker
from .dir_printer import print_dir_indent, print_dir_tree
from .editor import Editor
from .file_handler import FileHandler
from .session import Session

_ARGUMENT = re.compile(r'"[^"]*"|[^ ]+')

HELP_TEXT = (
    "Commands: load <file>, save, close, editor-list, edit <file>, exit, "
    "print-tree, print-indent [indent], showid true/false, spell-check, "
    "dir-tree, dir-indent [indent], insert <tag> <id> <before-id> [text], "
    "append <tag> <id> <parent-id> [text], edit-id <old> <new>, "
    "edit-text <id> [text], delete <id>, undo, redo, history"
)


class CommandError(Exception):
    """Bad command usage (missing arguments, no active editor, ...)."""


def split_arguments(arguments: str) -> List[str]:
    """Split on spaces, keeping double-quoted groups together (quotes removed)."""
    return [token.strip('"') for token in _ARGUMENT.findall(arguments)]


def _parse_indent(argument: str, default: int) -> int:
    try:
        return int(argument) if argument.strip() else default
    except ValueError:
        return default


class CommandHandler:
    """
    Executes editor commands against a ``Session``.

    Mutating commands operate on the active editor and mark it dirty.
    """

    def __init__(
        self,
        session: Session,
        config: Optional[HtmlCLIConfig] = None,
        file_handler: Optional[FileHandler] = None,
        spell_checker: Optional[SpellChecker] = None,
    ):
        self.session = session
        self.config = config or HtmlCLIConfig()
        self.file_handler = file_handler or FileHandler(self.config.session.files_dir)
        self.spell_checker = spell_checker or SpellChecker(self.config.spell_check)
        self.logger = logging.getLogger(__name__)

        self._close_requests: Set[str] = set()
        self._commands: Dict[str, Callable[[str], Awaitable[str]]] = {
            "help": self._help,
            "load": self._load,
            "save": self._save,
            "close": self._close,
            "editor-list": self._editor_list,
            "edit": self._edit,
            "exit": self._exit,
            "print-tree": self._print_tree,
            "print-indent": self._print_indent,
            "showid": self._show_id,
            "spell-check": self._spell_check,
            "dir-tree": self._dir_tree,
            "dir-indent": self._dir_indent,
            "insert": self._insert,
            "append": self._append,
            "edit-id": self._edit_id,
            "edit-text": self._edit_text,
            "delete": self._delete,
            "undo": self._undo,
            "redo": self._redo,
            "history": self._history,
        }

    async def execute_command(self, command_line: str) -> str:
        """Run one command line and return the message to show."""
        parts = command_line.strip().split(" ", 1)
        command = parts[0].lower()
        arguments = parts[1].strip() if len(parts) > 1 else ""

        handler = self._commands.get(command)
        if handler is None:
            return f"Unknown command: {command}"

        try:
            return await handler(arguments)
        except (HtmlEditorError, CommandError, OSError) as e:
            self.logger.debug(f"Command '{command}' failed: {e}")
            return f"Error: {e}"

    def _active_editor(self) -> Editor:
        if self.session.active_editor is None:
            raise CommandError("No active editor.")
        return self.session.active_editor

    def _require_arguments(self, arguments: str, count: int, usage: str) -> List[str]:
        args = split_arguments(arguments)
        if len(args) < count:
            raise CommandError(f"usage: {usage}")
        return args

    async def _help(self, arguments: str) -> str:
        return HELP_TEXT

    async def _load(self, file_path: str) -> str:
        if not file_path:
            return "Error: no filepath provided."
        if self.session.get_editor_by_file_path(file_path) is not None:
            return "Error: file already loaded."
        editor = Editor(
            file_path,
            self.file_handler,
            show_id=self.config.editor.show_id,
            indent_size=self.config.editor.indent_size,
        )
        self.session.add_editor(editor)
        return f"File '{file_path}' loaded. Active editor switched."

    async def _save(self, arguments: str) -> str:
        self._active_editor().save()
        return "File saved."

    async def _close(self, arguments: str) -> str:
        editor = self._active_editor()

        if editor.is_dirty:
            if editor.file_path not in self._close_requests:
                self._close_requests.add(editor.file_path)
                return (
                    f"File '{editor.file_path}' not saved. Are you sure you want to close it? "
                    "(Call 'close' again to confirm)"
                )
            self._close_requests.discard(editor.file_path)

        self.session.remove_editor(editor)
        return f"Closed '{editor.file_path}'."

    async def _editor_list(self, arguments: str) -> str:
        if not self.session.editors:
            return "No editors open."
        lines = []
        for editor in self.session.editors:
            prefix = ">" if editor is self.session.active_editor else " "
            suffix = "*" if editor.is_dirty else ""
            lines.append(f"{prefix} {editor.file_path}{suffix}")
        return "\n".join(lines)

    async def _edit(self, file_path: str) -> str:
        if not file_path:
            return "Error: no filepath provided."
        editor = self.session.get_editor_by_file_path(file_path)
        if editor is None:
            return "Error: editor not found for that file."
        self.session.active_editor = editor
        return f"Switched active editor to '{file_path}'."

    async def _exit(self, arguments: str) -> str:
        return "Exiting editor."

    async def _run_spell_check(self, editor: Editor) -> Optional[str]:
        if not self.config.spell_check.enabled:
            return None
        return await editor.html_editor.spell_check(self.spell_checker)

    async def _print_tree(self, arguments: str) -> str:
        editor = self._active_editor()
        report = await self._run_spell_check(editor)
        tree = editor.html_editor.print_tree(
            show_id=editor.show_id,
            mark_error=report is not None,
            use_symbols=self.config.editor.use_symbols,
            indent_size=self.config.editor.tree_indent_size,
        )
        if report is None:
            return f"HTML Tree:\n{tree}"
        return f"{report}\nHTML Tree:\n{tree}"

    async def _print_indent(self, arguments: str) -> str:
        editor = self._active_editor()
        report = await self._run_spell_check(editor)
        indented = editor.html_editor.print_indent(_parse_indent(arguments, self.config.editor.indent_size))
        if report is None:
            return f"Indented HTML:\n{indented}"
        return f"{report}\nIndented HTML:\n{indented}"

    async def _show_id(self, arguments: str) -> str:
        editor = self._active_editor()
        value = arguments.lower()
        if value == "true":
            editor.show_id = True
            return "ShowId enabled."
        if value == "false":
            editor.show_id = False
            return "ShowId disabled."
        return "Error: invalid argument, use showid true/false."

    async def _spell_check(self, arguments: str) -> str:
        editor = self._active_editor()
        return await editor.html_editor.spell_check(self.spell_checker)

    async def _dir_tree(self, arguments: str) -> str:
        return print_dir_tree(Path(self.file_handler.base_dir), self.session.editors)

    async def _dir_indent(self, arguments: str) -> str:
        indent = _parse_indent(arguments, 4)
        return print_dir_indent(Path(self.file_handler.base_dir), self.session.editors, indent)

    async def _insert(self, arguments: str) -> str:
        editor = self._active_editor()
        args = self._require_arguments(arguments, 3, "insert <tag> <id> <before-id> [text]")
        result = editor.html_editor.insert(args[0], args[1], args[2], args[3] if len(args) > 3 else "")
        editor.is_dirty = True
        return result.description

    async def _append(self, arguments: str) -> str:
        editor = self._active_editor()
        args = self._require_arguments(arguments, 3, "append <tag> <id> <parent-id> [text]")
        result = editor.html_editor.append(args[0], args[1], args[2], args[3] if len(args) > 3 else "")
        editor.is_dirty = True
        return result.description

    async def _edit_id(self, arguments: str) -> str:
        editor = self._active_editor()
        args = self._require_arguments(arguments, 2, "edit-id <old-id> <new-id>")
        result = editor.html_editor.edit_id(args[0], args[1])
        editor.is_dirty = True
        return result.description

    async def _edit_text(self, arguments: str) -> str:
        editor = self._active_editor()
        args = self._require_arguments(arguments, 1, "edit-text <id> [text]")
        result = editor.html_editor.edit_text(args[0], args[1] if len(args) > 1 else "")
        editor.is_dirty = True
        return result.description

    async def _delete(self, arguments: str) -> str:
        editor = self._active_editor()
        args = self._require_arguments(arguments, 1, "delete <id>")
        result = editor.html_editor.delete(args[0])
        editor.is_dirty = True
        return result.description

    async def _undo(self, arguments: str) -> str:
        editor = self._active_editor()
        editor.html_editor.undo()
        editor.is_dirty = True
        return "Undo completed."

    async def _redo(self, arguments: str) -> str:
        editor = self._active_editor()
        editor.html_editor.redo()
        editor.is_dirty = True
        return "Redo completed."

    async def _history(self, arguments: str) -> str:
        history = self._active_editor().html_editor.history
        lines = []
        for index, snapshot in enumerate(history.get_history()):
            marker = "→" if index == 0 else " "
            lines.append(f"{marker} {snapshot.timestamp:%H:%M:%S} {snapshot.description or '-'}")
        lines.append(f"(undo: {history.undo_depth}, redo: {history.redo_depth})")
        return "\n".join(lines)
