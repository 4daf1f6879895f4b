"""
Spell checking through the LanguageTool service.
"""

from .spell_checker import SpellChecker, NO_ERRORS_MESSAGE

__all__ = ["SpellChecker", "NO_ERRORS_MESSAGE"]
