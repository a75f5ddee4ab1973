"""
citegen/extractors.py

Local extractors that infer citation metadata without any API calls.
These use regex and pattern matching over raw document text or a URL.

Extraction is best effort: anything that cannot be found is filled with a
placeholder, and no input makes these functions raise.
"""

import logging
import os
import re
from datetime import date
from typing import Optional, Union
from urllib.parse import unquote, urlparse

from .config import (
    AUTHOR_PLACEHOLDER, ORGANIZATION_PLACEHOLDER, PAGE_TITLE_PLACEHOLDER,
    TITLE_PLACEHOLDER, WEBSITE_PLACEHOLDER, MAX_SCAN_CHARS,
    current_year, format_access_date,
)
from .detectors import detect_source_type, is_video_host
from .formatters import format_manual_citation
from .models import Citation, CitationStyle, SourceType

logger = logging.getLogger(__name__)

# =============================================================================
# PATTERNS
# =============================================================================

YEAR_PATTERN = re.compile(r'\b(?:19|20)\d{2}\b')

# Keywords are case-insensitive, the captured name must be capitalized
AUTHOR_PATTERNS = (
    re.compile(r'\b(?i:by|authors?:?)\s+([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*)'),
    re.compile(r'(?:\b(?i:written by)|©)\s+([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*)'),
)

DOI_PATTERN = re.compile(r'10\.\d{4,}/\S+')
ISBN_PATTERN = re.compile(r'ISBN[:\s]*([0-9-X]+)', re.IGNORECASE)
PUBLISHER_PATTERN = re.compile(
    r'\b(?i:publisher|published by|press|publishing)[:\s]*([A-Z][a-zA-Z\s]+)'
)
EXTENSION_PATTERN = re.compile(r'\.[^/.]+$')


def _search(pattern: re.Pattern, text: str, group: int = 0) -> str:
    match = pattern.search(text)
    return match.group(group) if match else ""


def title_from_filename(filename: str) -> str:
    """'deep-work_notes.txt' -> 'deep work notes'."""
    name = os.path.basename(filename or "")
    name = EXTENSION_PATTERN.sub('', name)
    return re.sub(r'[-_]', ' ', name).strip()


# =============================================================================
# DOCUMENT EXTRACTOR
# =============================================================================

def extract_from_document_text(
    content: str,
    filename: str,
    today: Optional[date] = None,
) -> Citation:
    """
    Extract citation metadata from a document's text and filename.

    Extracts:
    - Title from the filename
    - Year from the text, then the filename (default: current year)
    - Author from "by ..." / "Author: ..." / "written by ..." / "© ..." phrases
    - DOI, ISBN and publisher when present

    Only the first MAX_SCAN_CHARS characters of the text are scanned.

    Returns:
        Citation with the detected source type and the extracted fields
    """
    content = content or ""
    filename = filename or ""
    text = content[:MAX_SCAN_CHARS]

    year = _search(YEAR_PATTERN, text) or _search(YEAR_PATTERN, filename) or current_year(today)

    authors = ""
    for pattern in AUTHOR_PATTERNS:
        authors = _search(pattern, text, 1)
        if authors:
            break

    doi = _search(DOI_PATTERN, text).rstrip('.,;')
    isbn = _search(ISBN_PATTERN, text, 1)
    publisher = _search(PUBLISHER_PATTERN, text, 1).strip()

    metadata = Citation(
        source_type=detect_source_type(text, filename),
        authors=authors or AUTHOR_PLACEHOLDER,
        title=title_from_filename(filename) or TITLE_PLACEHOLDER,
        year=year,
        doi=doi,
        isbn=isbn,
        publisher=publisher,
    )
    logger.debug(
        "Extracted from %r: type=%s authors=%r year=%s doi=%r",
        filename, metadata.source_type.value, metadata.authors, year, doi,
    )
    return metadata


# =============================================================================
# URL EXTRACTOR
# =============================================================================

def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def extract_from_url(url_string: str, today: Optional[date] = None) -> Citation:
    """
    Extract basic metadata from a URL.

    Extracts:
    - Website name from the first label of the hostname
    - Title from the last path segment (falls back to the website name)
    - Source type: video for YouTube/Vimeo hosts, website otherwise
    - Access date: today

    A string that is not an absolute URL yields a placeholder website
    citation that keeps the raw string as its URL.
    """
    raw = url_string or ""
    access_date = format_access_date(today)
    year = current_year(today)

    try:
        parsed = urlparse(raw.strip())
        hostname = parsed.hostname or ""
    except ValueError:
        parsed, hostname = None, ""

    if parsed is None or not parsed.scheme or not hostname:
        logger.debug("Not a parseable URL: %r", raw)
        return Citation(
            source_type=SourceType.WEBSITE,
            authors=AUTHOR_PLACEHOLDER,
            title=PAGE_TITLE_PLACEHOLDER,
            year=year,
            website_name=WEBSITE_PLACEHOLDER,
            url=raw,
            access_date=access_date,
        )

    site = re.sub(r'^www\.', '', hostname).split('.')[0]
    website_name = _capitalize(site)

    path_parts = [p for p in parsed.path.split('/') if p]
    slug = unquote(path_parts[-1]) if path_parts else ""
    slug = EXTENSION_PATTERN.sub('', re.sub(r'[-_]', ' ', slug))
    title = ' '.join(_capitalize(w) for w in slug.split()) or website_name

    source_type = SourceType.VIDEO if is_video_host(hostname) else SourceType.WEBSITE
    is_video = source_type == SourceType.VIDEO

    return Citation(
        source_type=source_type,
        authors=ORGANIZATION_PLACEHOLDER,
        title=title or PAGE_TITLE_PLACEHOLDER,
        year=year,
        website_name=website_name,
        url=raw,
        access_date=access_date,
        channel_name=website_name if is_video else "",
        video_url=raw if is_video else "",
    )


# =============================================================================
# ONE-SHOT HELPERS
# =============================================================================

def generate_citation_from_document(
    content: str,
    filename: str,
    style: Union[str, CitationStyle],
    today: Optional[date] = None,
) -> str:
    """Extract metadata from a document and format it in one step."""
    metadata = extract_from_document_text(content, filename, today)
    return format_manual_citation(metadata, metadata.source_type, style)


def generate_citation_from_url(
    url_string: str,
    style: Union[str, CitationStyle],
    today: Optional[date] = None,
) -> str:
    """Extract metadata from a URL and format it in one step."""
    metadata = extract_from_url(url_string, today)
    return format_manual_citation(metadata, metadata.source_type, style)
