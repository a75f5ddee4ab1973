"""
citegen/detectors.py

Pattern detection for source type classification.

Fast, free, substring-based checks over an uploaded document's text and
filename. The order of the checks matters: journal markers win over web
markers, and anything unrecognized is treated as a book.
"""

from .config import VIDEO_HOSTS
from .models import SourceType

JOURNAL_FILENAME_MARKERS = ('article',)
JOURNAL_CONTENT_MARKERS = ('journal', 'doi:')
WEBSITE_CONTENT_MARKERS = ('http', 'www.')


# =============================================================================
# INDIVIDUAL DETECTORS
# =============================================================================

def is_journal(content: str, filename: str) -> bool:
    """Filename mentions 'article', or the text mentions a journal or a 'doi:' tag."""
    lower_content = content.lower()
    lower_filename = filename.lower()
    return (
        any(marker in lower_filename for marker in JOURNAL_FILENAME_MARKERS)
        or any(marker in lower_content for marker in JOURNAL_CONTENT_MARKERS)
    )


def is_website(content: str) -> bool:
    """Text contains a link."""
    lower = content.lower()
    return any(marker in lower for marker in WEBSITE_CONTENT_MARKERS)


def is_video_host(hostname: str) -> bool:
    """Check if a hostname belongs to a video platform."""
    lower = (hostname or "").lower()
    return any(host in lower for host in VIDEO_HOSTS)


# =============================================================================
# MAIN DETECTION FUNCTION
# =============================================================================

def detect_source_type(content: str, filename: str) -> SourceType:
    """
    Infer the source type of an uploaded document.

    Args:
        content: Document text (may be empty)
        filename: Original filename (may be empty)

    Returns:
        SourceType.JOURNAL, SourceType.WEBSITE, or SourceType.BOOK
    """
    content = content or ""
    filename = filename or ""

    if is_journal(content, filename):
        return SourceType.JOURNAL
    if is_website(content):
        return SourceType.WEBSITE
    return SourceType.BOOK
