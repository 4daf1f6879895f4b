"""
Persistence of the open-editor list between runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ValidationError

from .editor import Editor
from .file_handler import FileHandler
from .session import Session

STATE_FILE_NAME = "session_state.json"


class EditorState(BaseModel):
    file_path: str
    show_id: bool = True


class SessionState(BaseModel):
    active_editor_file_path: Optional[str] = None
    editors: List[EditorState] = []


class SessionStateManager:
    """
    Saves and restores which files are open and which one is active.

    Only file paths and display settings are stored; documents are re-read
    from their files on load. A missing or unreadable state file yields an
    empty session.
    """

    def __init__(
        self,
        state_dir: Union[str, Path] = ".temp",
        file_handler: Optional[FileHandler] = None,
        indent_size: int = 4,
    ):
        self.state_file = Path(state_dir) / STATE_FILE_NAME
        self.file_handler = file_handler or FileHandler()
        self.indent_size = indent_size
        self.logger = logging.getLogger(__name__)

    def load_session(self) -> Session:
        session = Session()
        if not self.state_file.exists():
            return session

        try:
            state = SessionState.model_validate_json(self.state_file.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            self.logger.warning(f"Ignoring unreadable session state {self.state_file}: {e}")
            return session

        for editor_state in state.editors:
            editor = Editor(
                editor_state.file_path,
                self.file_handler,
                show_id=editor_state.show_id,
                indent_size=self.indent_size,
            )
            session.add_editor(editor)

        if state.active_editor_file_path:
            active = session.get_editor_by_file_path(state.active_editor_file_path)
            if active is not None:
                session.active_editor = active

        return session

    def save_session(self, session: Session) -> None:
        state = SessionState(
            active_editor_file_path=session.active_editor.file_path if session.active_editor else None,
            editors=[EditorState(file_path=e.file_path, show_id=e.show_id) for e in session.editors],
        )
        self.state_file.parent.mkdir(parents=True, exist_ok=True)
        self.state_file.write_text(state.model_dump_json(indent=2), encoding="utf-8")
