"""
citegen/authors.py

Author-list collapsing for the manual formatters.

Author input is free text. Commas and ampersands are both treated as
separators between authors, so "Smith, J." splits into two tokens; the only
exception is a lone "Surname, Given" pair such as "Smith, John", which is
kept as one inverted name.
"""

import re
from typing import List, Union

from .models import CitationStyle

AUTHOR_SEPARATORS = re.compile(r'[,&]')

# "Smith, John" / "O'Brien, Mary Ann": one surname, full given names, no '&'
INVERTED_NAME = re.compile(r"^[A-Z][A-Za-z'\-]+,\s*[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*$")

# Author-list conventions, grouped by family
APA_FAMILY = frozenset({CitationStyle.APA, CitationStyle.HARVARD})
MLA_FAMILY = frozenset({CitationStyle.MLA, CitationStyle.CHICAGO})


def split_authors(raw: str) -> List[str]:
    """Split a raw author string into trimmed, non-empty names."""
    if not raw:
        return []
    clean = raw.strip()
    if INVERTED_NAME.match(clean):
        return [clean]
    return [a.strip() for a in AUTHOR_SEPARATORS.split(clean) if a.strip()]


def format_authors(raw: str, style: Union[str, CitationStyle]) -> str:
    """
    Collapse a raw author string into style-specific prose.

    Rules:
    - APA/Harvard: "A", "A & B", "A, B, & C"
    - MLA/Chicago: "A", "A, and B", "A, et al."
    - IEEE: "A", "A and B", "A, B, and C"

    Raises:
        UnknownStyleError: if the style is not recognized
    """
    style = CitationStyle.from_string(style)
    authors = split_authors(raw)

    if not authors:
        return ""
    if len(authors) == 1:
        return authors[0]

    if style in APA_FAMILY:
        if len(authors) == 2:
            return f"{authors[0]} & {authors[1]}"
        return f"{', '.join(authors[:-1])}, & {authors[-1]}"

    if style in MLA_FAMILY:
        if len(authors) == 2:
            return f"{authors[0]}, and {authors[1]}"
        # MLA 9 keeps only the first author for three or more
        return f"{authors[0]}, et al."

    if len(authors) == 2:
        return f"{authors[0]} and {authors[1]}"
    return f"{', '.join(authors[:-1])}, and {authors[-1]}"
