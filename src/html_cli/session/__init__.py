"""
Multi-document session: open editors, file access and the command loop.
"""

from .file_handler import FileHandler
from .editor import Editor
from .session import Session
from .state_manager import SessionStateManager
from .command_handler import CommandHandler, CommandError
from .interactive import InteractiveSession

__all__ = [
    "FileHandler",
    "Editor",
    "Session",
    "SessionStateManager",
    "CommandHandler",
    "CommandError",
    "InteractiveSession",
]
