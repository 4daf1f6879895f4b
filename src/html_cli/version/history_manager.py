"""
Undo/redo history over whole-document snapshots.

Each document owns one ``HistoryManager``. States are stored as deep copies
of the tree, so nothing done to the live tree afterwards can reach a stored
snapshot, and every tree handed back is a fresh copy as well.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from ..core.document_model import Html
from ..core.errors import NothingToRedoError, NothingToUndoError


@dataclass
class Snapshot:
    """A stored document state."""

    tree: Html
    description: str = ""
    timestamp: datetime = field(default_factory=datetime.now)


class HistoryManager:
    """
    Linear two-stack history.

    The top of the undo stack is always the current state; it is never
    undone past, so a document with a single saved state has nothing to undo.
    """

    def __init__(self):
        self._undo_stack: List[Snapshot] = []
        self._redo_stack: List[Snapshot] = []
        self.logger = logging.getLogger(__name__)

    def save_state(self, state: Html, description: str = "") -> None:
        """Push a copy of ``state`` and forget everything that could be redone."""
        self._undo_stack.append(Snapshot(state.clone(), description))
        self._redo_stack.clear()
        self.logger.debug(f"Saved state #{len(self._undo_stack)}: {description or '-'}")

    def undo(self) -> Html:
        """
        Step back one state.

        Returns:
            A fresh copy of the state that is current after the undo

        Raises:
            NothingToUndoError: If only the current state is left
        """
        if len(self._undo_stack) <= 1:
            raise NothingToUndoError()

        undone = self._undo_stack.pop()
        self._redo_stack.append(undone)
        self.logger.debug(f"Undo: {undone.description or '-'}")
        return self._undo_stack[-1].tree.clone()

    def redo(self) -> Html:
        """
        Re-apply the most recently undone state.

        Returns:
            A fresh copy of the redone state

        Raises:
            NothingToRedoError: If nothing has been undone since the last save
        """
        if not self._redo_stack:
            raise NothingToRedoError()

        snapshot = self._redo_stack.pop()
        self._undo_stack.append(Snapshot(snapshot.tree.clone(), snapshot.description))
        self.logger.debug(f"Redo: {snapshot.description or '-'}")
        return snapshot.tree.clone()

    @property
    def can_undo(self) -> bool:
        return len(self._undo_stack) > 1

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    @property
    def undo_depth(self) -> int:
        """Number of states that can be undone."""
        return max(len(self._undo_stack) - 1, 0)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def get_history(self) -> List[Snapshot]:
        """Saved states, newest first. The first entry is the current state."""
        return list(reversed(self._undo_stack))
