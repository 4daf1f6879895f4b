"""
Spell checking of element text through the LanguageTool HTTP API.

Every element with text is sent to the service; the element's
``is_spell_error`` flag is set from the answer. The flag is only refreshed
by the next check, never by edits.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from ..config import SpellCheckConfig
from ..core.document_model import HTMLElement

NO_ERRORS_MESSAGE = "No spelling errors found."


class MatchCategory(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None


class MatchRule(BaseModel):
    id: Optional[str] = None
    description: Optional[str] = None
    category: Optional[MatchCategory] = None


class MatchContext(BaseModel):
    text: str = ""
    offset: int = 0
    length: int = 0


class Replacement(BaseModel):
    value: str = ""


class Match(BaseModel):
    """A single problem reported by LanguageTool."""

    message: str = ""
    context: Optional[MatchContext] = None
    replacements: List[Replacement] = Field(default_factory=list)
    rule: Optional[MatchRule] = None

    @property
    def category_name(self) -> Optional[str]:
        if self.rule is None or self.rule.category is None:
            return None
        return self.rule.category.name

    @property
    def misspelled_word(self) -> str:
        ctx = self.context
        if ctx is None or ctx.offset + ctx.length > len(ctx.text):
            return ""
        return ctx.text[ctx.offset:ctx.offset + ctx.length]


class LanguageToolResponse(BaseModel):
    matches: List[Match] = Field(default_factory=list)


class SpellChecker:
    """
    Checks the text of a whole element tree.

    Pass an ``httpx.AsyncClient`` to reuse connections or to plug in a test
    transport; otherwise a client is created for each ``check`` call.
    """

    def __init__(
        self,
        config: Optional[SpellCheckConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or SpellCheckConfig()
        self.client = client
        self.logger = logging.getLogger(__name__)

    async def check(self, root: HTMLElement) -> str:
        """
        Check ``root`` and all descendants, updating their error flags.

        Returns:
            Human-readable report, or a message saying nothing was found
        """
        errors: List[str] = []

        if self.client is not None:
            await self._check_recursive(self.client, root, errors)
        else:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                await self._check_recursive(client, root, errors)

        return "\n".join(errors) if errors else NO_ERRORS_MESSAGE

    async def _check_recursive(
        self,
        client: httpx.AsyncClient,
        element: HTMLElement,
        errors: List[str],
    ) -> None:
        if element.content:
            element_errors = await self._check_text(client, element.content, element.id)
            element.is_spell_error = bool(element_errors)
            errors.extend(element_errors)
        else:
            element.is_spell_error = False

        for child in element.children:
            await self._check_recursive(client, child, errors)

    async def _check_text(self, client: httpx.AsyncClient, text: str, element_id: str) -> List[str]:
        """Check a single text; failures are logged and count as no errors."""
        try:
            response = await client.post(
                self.config.api_url,
                data={"text": text, "language": self.config.language},
            )
            response.raise_for_status()
            result = LanguageToolResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            self.logger.warning(f"Spell check request failed for element '{element_id}': {e}")
            return []
        except (ValueError, ValidationError) as e:
            self.logger.error(f"Unexpected spell check response for element '{element_id}': {e}", exc_info=True)
            return []

        reports = []
        for match in result.matches:
            if match.category_name not in self.config.categories:
                continue
            reports.append(self._format_match(match, element_id))
        return reports

    def _format_match(self, match: Match, element_id: str) -> str:
        suggestions = [r.value for r in match.replacements[:self.config.max_suggestions]]
        suggestions_text = ", ".join(suggestions) if suggestions else "No suggestions available"
        ctx = match.context or MatchContext()

        return (
            f"Element '{element_id}' - Misspelled word: '{match.misspelled_word}'\n"
            f"  Context: '{ctx.text}'\n"
            f"  Position: Offset {ctx.offset}, Length {ctx.length}\n"
            f"  Suggestions: {suggestions_text}\n"
        )
