"""
citegen/formatters/harvard.py

Harvard (author-date) citation formatter.
"""

from .base import BaseFormatter, register_formatter
from ..models import Citation, CitationStyle


@register_formatter(CitationStyle.HARVARD)
class HarvardFormatter(BaseFormatter):
    """
    Harvard formatter.

    Every entry opens with "Author (Year)"; a missing year becomes "(n.d.)".

    Format patterns:
    - Book: Author (Year) *Title*. Publisher.
    - Website: Author (Year) "Title." [online] Website. Available at: URL [Accessed Date].
    - Journal: Author (Year) "Title," *Journal*, Vol(Issue), pp. Pages. doi: DOI
    - Video: Channel (Year) *Title*. [video] Available at: URL
    """

    def _head(self, author: str, m: Citation) -> str:
        return self.join([author, self.paren_year(m.year, self.no_date)])

    def format_book(self, m: Citation) -> str:
        return self.join([
            self._head(self.authors(m), m),
            self.terminate(self.italicize(m.title)),
            self.terminate(m.publisher),
        ])

    def format_website(self, m: Citation) -> str:
        availability = self.join([
            f"Available at: {m.url}" if m.url else "",
            f"[Accessed {m.access_date}]" if m.access_date else "",
        ])
        return self.join([
            self._head(self.authors(m), m),
            self.quote(m.title, "."),
            "[online]",
            self.terminate(m.website_name),
            self.terminate(availability),
        ])

    def format_journal(self, m: Citation) -> str:
        container = self.italicize(m.journal_name)
        if m.volume:
            container = self.join([container, m.volume], ", ")
        if m.issue:
            container += f"({m.issue})"
        if m.pages:
            container = self.join([container, f"pp. {m.pages}"], ", ")

        return self.join([
            self._head(self.authors(m), m),
            self.quote(m.title, "," if container else "."),
            self.terminate(container),
            self.doi_link(m.doi, "doi: ") or m.url,
        ])

    def format_video(self, m: Citation) -> str:
        return self.join([
            self._head(self.creator(m, self.authors(m)), m),
            self.terminate(self.italicize(m.title)),
            "[video]",
            f"Available at: {m.video_url}" if m.video_url else "",
        ])
