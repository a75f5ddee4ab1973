"""
citegen/formatters/base.py

Base citation formatter and style registry.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, Optional, Type, Union

from ..authors import format_authors
from ..config import DEFAULT_VIDEO_PLATFORM, NO_DATE
from ..exceptions import UnknownSourceTypeError, UnknownStyleError
from ..models import Citation, CitationLike, CitationStyle, SourceType, coerce_citation

TERMINATORS = ('.', '?', '!')


class BaseFormatter(ABC):
    """
    Abstract base class for citation formatters.

    Each style (APA, MLA, etc.) implements one method per source type.
    Every method builds its output from fragments; a fragment whose field is
    empty is dropped together with its punctuation, so missing data never
    leaves doubled spaces, empty brackets or empty quotes behind.

    Italics are marked with asterisks (``*Title*``) for the caller to render.
    """

    style: CitationStyle
    no_date: str = NO_DATE

    def format(self, citation: CitationLike, source_type: Union[str, SourceType, None] = None) -> str:
        """
        Main entry point - routes to type-specific formatter.

        Args:
            citation: Citation or partial mapping of its fields
            source_type: Overrides the citation's own source type when given
        """
        m = coerce_citation(citation)
        source_type = SourceType.from_string(source_type) if source_type else m.source_type

        formatters: Dict[SourceType, Callable[[Citation], str]] = {
            SourceType.BOOK: self.format_book,
            SourceType.WEBSITE: self.format_website,
            SourceType.JOURNAL: self.format_journal,
            SourceType.VIDEO: self.format_video,
        }
        formatter = formatters.get(source_type)
        if formatter is None:
            raise UnknownSourceTypeError(source_type)
        return formatter(m)

    # =========================================================================
    # ABSTRACT METHODS - Must be implemented by each style
    # =========================================================================

    @abstractmethod
    def format_book(self, m: Citation) -> str:
        """Format a book citation."""

    @abstractmethod
    def format_website(self, m: Citation) -> str:
        """Format a web page citation."""

    @abstractmethod
    def format_journal(self, m: Citation) -> str:
        """Format a journal article citation."""

    @abstractmethod
    def format_video(self, m: Citation) -> str:
        """Format an online video citation."""

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    def authors(self, m: Citation) -> str:
        return format_authors(m.authors, self.style)

    @staticmethod
    def italicize(text: str) -> str:
        """Wrap text in asterisks for italics (markdown)."""
        return f"*{text}*" if text else ""

    @staticmethod
    def quote(text: str, punct: str = "") -> str:
        """Wrap text in quotation marks, with trailing punctuation inside."""
        if not text:
            return ""
        if text.endswith(TERMINATORS):
            punct = ""
        return f'"{text}{punct}"'

    @staticmethod
    def terminate(text: str, mark: str = ".") -> str:
        """End a fragment with a period unless it already ends a sentence.

        A closing italics marker is looked through, so "*Why?*" stays as is.
        """
        if not text:
            return ""
        return text if text.rstrip("*").endswith(TERMINATORS) else text + mark

    @staticmethod
    def join(parts: Iterable[str], sep: str = " ") -> str:
        """Join the non-empty fragments."""
        return sep.join(p for p in parts if p)

    @staticmethod
    def paren_year(year: str, placeholder: Optional[str] = None) -> str:
        """'(2016)', or '(n.d.)' when a placeholder is wanted."""
        year = year or placeholder or ""
        return f"({year})" if year else ""

    @staticmethod
    def doi_link(doi: str, prefix: str = "https://doi.org/") -> str:
        if not doi:
            return ""
        return doi if doi.startswith('http') else f"{prefix}{doi}"

    @staticmethod
    def video_platform(m: Citation) -> str:
        return "Vimeo" if 'vimeo' in m.video_url.lower() else DEFAULT_VIDEO_PLATFORM

    @staticmethod
    def creator(m: Citation, authors: str) -> str:
        """Channel name if known, else the formatted authors."""
        return m.channel_name or authors


# =============================================================================
# FORMATTER REGISTRY
# =============================================================================

_formatters: Dict[CitationStyle, Type[BaseFormatter]] = {}


def register_formatter(style: CitationStyle):
    """
    Decorator to register a formatter class for a style.

        @register_formatter(CitationStyle.APA)
        class APAFormatter: ...
    """
    def decorator(cls):
        cls.style = style
        _formatters[style] = cls
        return cls
    return decorator


def get_formatter(style: Union[str, CitationStyle]) -> BaseFormatter:
    """
    Get formatter instance for a style.

    Accepts CitationStyle enum or string (e.g. 'apa', 'MLA 9').

    Raises:
        UnknownStyleError: if no formatter handles the style
    """
    style = CitationStyle.from_string(style)
    formatter_cls = _formatters.get(style)
    if formatter_cls is None:
        raise UnknownStyleError(style)
    return formatter_cls()


def format_manual_citation(
    citation: CitationLike,
    source_type: Union[str, SourceType],
    style: Union[str, CitationStyle],
) -> str:
    """
    Format a citation with the local template rules.

    Deterministic and free of side effects: the same arguments always give
    the same string. Missing fields are left out rather than raising.

    Args:
        citation: Citation or partial mapping of its fields
        source_type: Source type whose template to use
        style: Citation style

    Returns:
        Formatted citation string
    """
    return get_formatter(style).format(citation, SourceType.from_string(source_type))
