"""
citegen/prompts.py

Prompt builders for AI-generated citations.

The structured facts sent to the text generator are the same ones the
manual formatters use; only the fields relevant to the source type are
listed.
"""

from typing import Union

from .config import AI_EXCERPT_CHARS
from .models import (
    FIELDS_BY_SOURCE_TYPE, Citation, CitationStyle, SourceType, get_style_name,
)

# Labels shown to the model
FIELD_LABELS = {
    'publisher': "Publisher",
    'website_name': "Website Name",
    'url': "URL",
    'access_date': "Access Date",
    'journal_name': "Journal",
    'volume': "Volume",
    'issue': "Issue",
    'pages': "Pages",
    'doi': "DOI",
    'channel_name': "Channel",
    'video_url': "URL",
}


def build_source_info(citation: Citation, source_type: SourceType) -> str:
    """
    Labelled, one-per-line listing of the citation's non-empty facts.

        Author(s): Smith, John
        Title: Deep Work
        Year: 2016
        Publisher: Grand Central
    """
    lines = []
    if citation.authors:
        lines.append(f"Author(s): {citation.authors}")
    if citation.title:
        lines.append(f"Title: {citation.title}")
    if citation.year:
        lines.append(f"Year: {citation.year}")

    for name in FIELDS_BY_SOURCE_TYPE[source_type]:
        value = getattr(citation, name)
        if value:
            lines.append(f"{FIELD_LABELS[name]}: {value}")
    return "\n".join(lines)


def build_citation_prompt(
    citation: Citation,
    source_type: SourceType,
    style: Union[str, CitationStyle],
) -> str:
    style_name = get_style_name(style)
    return (
        f"Generate a citation in {style_name} format for the following source:\n\n"
        f"Source Type: {source_type.value}\n"
        f"{build_source_info(citation, source_type)}\n\n"
        f"Please provide ONLY the formatted citation, nothing else. "
        f"Follow {style_name} guidelines exactly."
    )


def build_document_prompt(content: str, filename: str, style: Union[str, CitationStyle]) -> str:
    style_name = get_style_name(style)
    excerpt = (content or "")[:AI_EXCERPT_CHARS]
    return f"""Based on the following document information, extract metadata and generate a citation in {style_name} format.

Document Name: {filename}
Document Content (excerpt):
{excerpt}

Please:
1. Extract or infer: Author(s), Title, Year, Publisher (if applicable)
2. Determine the source type (book, article, report, etc.)
3. Generate a properly formatted {style_name} citation

If information is missing, make reasonable inferences from the content or use [Unknown] placeholders.

Output ONLY the formatted citation, nothing else."""


def build_url_prompt(url: str, style: Union[str, CitationStyle]) -> str:
    style_name = get_style_name(style)
    return f"""Generate a citation in {style_name} format for the following URL:

URL: {url}

Please:
1. Infer the source type (website, online article, video, etc.)
2. Extract or infer: Author/Organization, Title, Website Name, Publication Date
3. Include the access date as today's date
4. Generate a properly formatted {style_name} citation

Output ONLY the formatted citation, nothing else."""


def build_conversion_prompt(
    citations: str,
    source_style: Union[str, CitationStyle],
    target_style: Union[str, CitationStyle],
) -> str:
    source_name = get_style_name(source_style)
    target_name = get_style_name(target_style)
    return (
        f"Convert the following citations from {source_name} format to {target_name} format.\n\n"
        f"Input Citations ({source_name}):\n{citations}\n\n"
        f"Please convert each citation to {target_name} format. Maintain the same order. "
        f"Output ONLY the converted citations, one per line, with no additional text or explanations."
    )
