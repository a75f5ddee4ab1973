"""
citegen - Citation modeling and formatting engine

Turns bibliographic facts (authors, title, year, source-specific fields)
into references in five citation styles, and derives those facts from a
URL or an uploaded document.

Usage:
    from citegen import format_manual_citation, extract_from_url

    # Format from fields
    citation = format_manual_citation(
        {"authors": "Smith, John", "title": "Deep Work", "year": "2016",
         "publisher": "Grand Central"},
        "book", "apa",
    )
    # -> "Smith, John (2016). *Deep Work*. Grand Central."

    # Extract, then format
    metadata = extract_from_url("https://example.com/blog/deep-work-review")
    citation = format_manual_citation(metadata, metadata.source_type, "mla")

Architecture:
    ┌─────────────────────────────────────────┐
    │ Extractors / Detectors                  │
    │ (extractors.py, detectors.py)           │
    └─────────────────┬───────────────────────┘
                      ▼
            ┌─────────────────────┐
            │ Citation            │
            │ (models.py)         │
            └──────────┬──────────┘
                       │
            ┌──────────┴──────────┐
            │                     │
       MANUAL PATH            AI PATH
            │                     │
            ▼                     ▼
    ┌───────────────┐   ┌─────────────────────┐
    │ Formatters    │   │ Prompts + Gemini    │
    │ (formatters/) │   │ (prompts, gemini)   │
    └───────┬───────┘   └──────────┬──────────┘
            └──────────┬───────────┘
                       ▼
            ┌─────────────────────┐
            │ CitationCollection  │
            │ (collection.py)     │
            └─────────────────────┘

Modules:
    - models.py: SourceType, CitationStyle, Citation, style names, id generator
    - authors.py: author-list collapsing
    - formatters/: one formatter per style (APA, MLA, Chicago, Harvard, IEEE)
    - detectors.py: source type detection for documents
    - extractors.py: metadata extraction from document text and URLs
    - prompts.py / gemini.py: AI prompt builders and the Gemini generator
    - strategies.py: manual and AI formatting behind one interface
    - collection.py: ordered in-memory citation list with export
    - documents.py: reading uploads, writing .docx bibliographies
    - app.py: Flask API
"""

__version__ = "1.0.0"

# =============================================================================
# PUBLIC API
# =============================================================================

# Models
from .models import (
    Citation,
    CitationState,
    CitationStyle,
    SourceType,
    CITATION_STYLE_NAMES,
    FIELDS_BY_SOURCE_TYPE,
    generate_citation_id,
    get_style_name,
)

# Errors
from .exceptions import (
    CiteGenError,
    UnknownVariantError,
    UnknownStyleError,
    UnknownSourceTypeError,
    GenerationError,
    CitationNotFoundError,
    DuplicateCitationError,
    ValidationError,
    DocumentReadError,
)

# Authors
from .authors import format_authors, split_authors

# Formatting
from .formatters import (
    format_manual_citation,
    get_formatter,
    BaseFormatter,
    APAFormatter,
    MLAFormatter,
    ChicagoFormatter,
    HarvardFormatter,
    IEEEFormatter,
)

# Detection and extraction
from .detectors import detect_source_type
from .extractors import (
    extract_from_document_text,
    extract_from_url,
    generate_citation_from_document,
    generate_citation_from_url,
)

# Strategies and AI
from .gemini import GeminiGenerator
from .strategies import AIStrategy, CitationStrategy, ManualStrategy, get_strategy

# Collection and documents
from .collection import CitationCollection
from .documents import bibliography_to_docx, read_document_text

__all__ = [
    '__version__',

    # Models
    'Citation',
    'CitationState',
    'CitationStyle',
    'SourceType',
    'CITATION_STYLE_NAMES',
    'FIELDS_BY_SOURCE_TYPE',
    'generate_citation_id',
    'get_style_name',

    # Errors
    'CiteGenError',
    'UnknownVariantError',
    'UnknownStyleError',
    'UnknownSourceTypeError',
    'GenerationError',
    'CitationNotFoundError',
    'DuplicateCitationError',
    'ValidationError',
    'DocumentReadError',

    # Authors
    'format_authors',
    'split_authors',

    # Formatting
    'format_manual_citation',
    'get_formatter',
    'BaseFormatter',
    'APAFormatter',
    'MLAFormatter',
    'ChicagoFormatter',
    'HarvardFormatter',
    'IEEEFormatter',

    # Detection and extraction
    'detect_source_type',
    'extract_from_document_text',
    'extract_from_url',
    'generate_citation_from_document',
    'generate_citation_from_url',

    # Strategies and AI
    'GeminiGenerator',
    'AIStrategy',
    'CitationStrategy',
    'ManualStrategy',
    'get_strategy',

    # Collection and documents
    'CitationCollection',
    'bibliography_to_docx',
    'read_document_text',
]
