"""
citegen/strategies.py

Interchangeable ways of turning citation facts into a formatted string.

- ManualStrategy: local template rules, deterministic, no network.
- AIStrategy: delegates to an external text generator, a plain
  ``(prompt) -> text`` callable. Output may differ between calls.

Both take the same arguments, so callers pick a strategy once instead of
branching on an "use AI" flag at every call site.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, Optional, Union

from .exceptions import GenerationError, ValidationError
from .extractors import generate_citation_from_document, generate_citation_from_url
from .formatters import format_manual_citation
from .gemini import GeminiGenerator
from .models import CitationLike, CitationStyle, SourceType, coerce_citation
from .prompts import (
    build_citation_prompt, build_conversion_prompt,
    build_document_prompt, build_url_prompt,
)

logger = logging.getLogger(__name__)

Generator = Callable[[str], str]


class CitationStrategy(ABC):
    """Common interface of the manual and AI paths."""

    name: str = "base"
    deterministic: bool = False

    @abstractmethod
    def render(
        self,
        citation: CitationLike,
        source_type: Union[str, SourceType],
        style: Union[str, CitationStyle],
    ) -> str:
        """Format one citation from its structured fields."""

    @abstractmethod
    def render_document(self, content: str, filename: str, style: Union[str, CitationStyle]) -> str:
        """Format a citation for an uploaded document."""

    @abstractmethod
    def render_url(self, url: str, style: Union[str, CitationStyle]) -> str:
        """Format a citation for a URL."""


class ManualStrategy(CitationStrategy):
    """Template-based formatting."""

    name = "manual"
    deterministic = True

    def __init__(self, today: Optional[date] = None):
        # Fixed date for extraction defaults (year, access date); None means today
        self.today = today

    def render(self, citation, source_type, style) -> str:
        return format_manual_citation(citation, source_type, style)

    def render_document(self, content, filename, style) -> str:
        return generate_citation_from_document(content, filename, style, self.today)

    def render_url(self, url, style) -> str:
        return generate_citation_from_url(url, style, self.today)


class AIStrategy(CitationStrategy):
    """
    Formatting delegated to a text generator.

    Each call makes exactly one generator call and never retries; timeouts
    and retry policy belong to the generator.
    """

    name = "ai"

    def __init__(self, generate: Optional[Generator] = None):
        self.generate = generate if generate is not None else GeminiGenerator()

    def _call(self, prompt: str) -> str:
        try:
            text = self.generate(prompt)
        except GenerationError:
            raise
        except Exception as e:
            logger.error("Citation generation failed: %s", e)
            raise GenerationError(f"Text generator failed: {e}") from e

        if not isinstance(text, str) or not text.strip():
            raise GenerationError("Text generator returned an empty response")
        return text.strip()

    def render(self, citation, source_type, style) -> str:
        m = coerce_citation(citation)
        source_type = SourceType.from_string(source_type)
        style = CitationStyle.from_string(style)
        logger.info("AI citation: %s / %s", source_type.value, style.value)
        return self._call(build_citation_prompt(m, source_type, style))

    def render_document(self, content, filename, style) -> str:
        return self._call(build_document_prompt(content, filename, style))

    def render_url(self, url, style) -> str:
        return self._call(build_url_prompt(url, style))

    def convert(
        self,
        citations: str,
        source_style: Union[str, CitationStyle],
        target_style: Union[str, CitationStyle],
    ) -> str:
        """
        Convert already formatted citations from one style to another.

        Raises:
            ValidationError: if there is nothing to convert or both styles match
            GenerationError: if the generator fails
        """
        source_style = CitationStyle.from_string(source_style)
        target_style = CitationStyle.from_string(target_style)
        if not (citations or "").strip():
            raise ValidationError("No citations to convert")
        if source_style == target_style:
            raise ValidationError("Source and target styles must be different")
        return self._call(build_conversion_prompt(citations.strip(), source_style, target_style))


def get_strategy(use_ai: bool = False, generate: Optional[Generator] = None) -> CitationStrategy:
    """Manual strategy by default; AI strategy when asked for."""
    if use_ai:
        return AIStrategy(generate)
    return ManualStrategy()
