"""
Undo/redo history of document states.
"""

from .history_manager import HistoryManager, Snapshot

__all__ = ["HistoryManager", "Snapshot"]
