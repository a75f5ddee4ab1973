"""
citegen/collection.py

In-memory, insertion-ordered collection of generated citations.

A collection belongs to one session; it is not shared between concurrent
writers and is not persisted.
"""

import logging
from collections import OrderedDict
from typing import Dict, Iterator, List, Optional, Union

from .config import AUTO_GENERATED_AUTHORS, current_year
from .documents import bibliography_to_docx
from .exceptions import CitationNotFoundError, DuplicateCitationError
from .models import (
    Citation, CitationLike, CitationStyle, IdFactory, SourceType,
    coerce_citation, generate_citation_id, get_style_name,
)
from .strategies import CitationStrategy, ManualStrategy

logger = logging.getLogger(__name__)

EXPORT_SEPARATOR = "\n\n"


class CitationCollection:
    """
    Ordered citations keyed by id.

    Usage:
        collection = CitationCollection()
        collection.generate({"authors": "Smith, John", "title": "Deep Work"}, "book", "apa")
        text = collection.export("apa")
    """

    def __init__(
        self,
        strategy: Optional[CitationStrategy] = None,
        id_factory: Optional[IdFactory] = None,
    ):
        self.strategy = strategy or ManualStrategy()
        self.id_factory = id_factory or generate_citation_id
        self._citations: "OrderedDict[str, Citation]" = OrderedDict()

    # =========================================================================
    # MEMBERSHIP
    # =========================================================================

    def __len__(self) -> int:
        return len(self._citations)

    def __iter__(self) -> Iterator[Citation]:
        return iter(list(self._citations.values()))

    def __contains__(self, citation_id: str) -> bool:
        return citation_id in self._citations

    @property
    def citations(self) -> List[Citation]:
        return list(self._citations.values())

    def _new_id(self) -> str:
        citation_id = self.id_factory()
        while citation_id in self._citations:
            citation_id = self.id_factory()
        return citation_id

    def add(self, citation: Citation) -> Citation:
        """
        Append a citation.

        A citation without an id gets one from the collection's id factory.

        Raises:
            DuplicateCitationError: if the id is already in the collection
        """
        if not citation.id:
            citation.id = self._new_id()
        elif citation.id in self._citations:
            raise DuplicateCitationError(f"Citation id {citation.id!r} already in collection")

        citation.stored = True
        self._citations[citation.id] = citation
        logger.debug("Added citation %s (%d total)", citation.id, len(self._citations))
        return citation

    def get(self, citation_id: str) -> Citation:
        try:
            return self._citations[citation_id]
        except KeyError:
            raise CitationNotFoundError(citation_id) from None

    def remove(self, citation_id: str) -> Citation:
        """Remove a citation by id; the others keep their order."""
        try:
            citation = self._citations.pop(citation_id)
        except KeyError:
            raise CitationNotFoundError(citation_id) from None
        citation.stored = False
        return citation

    def clear(self) -> None:
        for citation in self._citations.values():
            citation.stored = False
        self._citations.clear()

    # =========================================================================
    # FORMATTING
    # =========================================================================

    def _strategy(self, strategy: Optional[CitationStrategy]) -> CitationStrategy:
        return strategy or self.strategy

    def generate(
        self,
        citation: CitationLike,
        source_type: Union[str, SourceType],
        style: Union[str, CitationStyle],
        strategy: Optional[CitationStrategy] = None,
    ) -> Citation:
        """
        Format a citation and append it.

        A mapping is turned into a new Citation with a fresh id. If the
        strategy fails (e.g. GenerationError from the AI path) nothing is
        added.
        """
        if isinstance(citation, Citation):
            entry = citation
        else:
            entry = coerce_citation(citation)
            entry.id = ""
        entry.set_source_type(source_type)
        style = CitationStyle.from_string(style)

        entry.formatted[style] = self._strategy(strategy).render(entry, entry.source_type, style)
        return self.add(entry)

    def add_generated(
        self,
        text: str,
        style: Union[str, CitationStyle],
        label: str = "",
    ) -> Citation:
        """
        Store an already formatted citation (e.g. auto-generated from a
        document or URL) under the given style.
        """
        style = CitationStyle.from_string(style)
        entry = Citation(
            id="",
            source_type=SourceType.WEBSITE,
            authors=AUTO_GENERATED_AUTHORS,
            title=label or "Unknown",
            year=current_year(),
            formatted={style: text.strip()},
        )
        return self.add(entry)

    def render(
        self,
        citation_id: str,
        style: Union[str, CitationStyle],
        strategy: Optional[CitationStrategy] = None,
    ) -> str:
        """Render a stored citation under another style and cache the result."""
        citation = self.get(citation_id)
        style = CitationStyle.from_string(style)
        text = self._strategy(strategy).render(citation, citation.source_type, style)
        citation.formatted[style] = text
        return text

    def render_all(
        self,
        style: Union[str, CitationStyle],
        strategy: Optional[CitationStrategy] = None,
        overwrite: bool = False,
    ) -> int:
        """
        Render every stored citation under a style.

        Citations that already have the style are skipped unless overwrite
        is set. Returns the number of citations rendered.
        """
        style = CitationStyle.from_string(style)
        count = 0
        for citation in self:
            if style in citation.formatted and not overwrite:
                continue
            self.render(citation.id, style, strategy)
            count += 1
        return count

    # =========================================================================
    # EXPORT
    # =========================================================================

    def entries(self, style: Union[str, CitationStyle]) -> List[str]:
        """Formatted strings for a style, in order; citations without it are skipped."""
        style = CitationStyle.from_string(style)
        return [c.formatted[style] for c in self._citations.values() if c.formatted.get(style)]

    def export(self, style: Union[str, CitationStyle], title: Optional[str] = None) -> str:
        """Plain-text bibliography: entries separated by a blank line."""
        parts = self.entries(style)
        if title:
            parts = [title] + parts
        return EXPORT_SEPARATOR.join(parts)

    def export_bibliography(self, style: Union[str, CitationStyle]) -> str:
        """Export with a 'BIBLIOGRAPHY (<style name>)' header line."""
        return self.export(style, title=f"BIBLIOGRAPHY ({get_style_name(style)})")

    @staticmethod
    def export_filename(style: Union[str, CitationStyle], extension: str = "txt") -> str:
        return f"bibliography-{CitationStyle.from_string(style).value}.{extension}"

    def export_docx(self, style: Union[str, CitationStyle]) -> bytes:
        return bibliography_to_docx(
            self.entries(style),
            title=f"Bibliography ({get_style_name(style)})",
        )

    def to_list(self) -> List[Dict]:
        return [c.to_dict() for c in self._citations.values()]
