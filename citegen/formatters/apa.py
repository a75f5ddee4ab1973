"""
citegen/formatters/apa.py

APA 7th Edition citation formatter.
Common in psychology, education, and social sciences.
"""

from .base import BaseFormatter, register_formatter
from ..models import Citation, CitationStyle


@register_formatter(CitationStyle.APA)
class APAFormatter(BaseFormatter):
    """
    APA 7th Edition formatter.

    Format patterns:
    - Book: Author (Year). *Title*. Publisher.
    - Website: Author (Year). "Title." Site. Retrieved Date from URL
    - Journal: Author (Year). "Title." *Journal*, Vol(Issue), pages. https://doi.org/DOI
    - Video: Channel (Year). *Title* [Video]. YouTube. URL

    A missing year drops the parenthetical entirely.
    """

    def _head(self, author: str, m: Citation) -> str:
        return self.terminate(self.join([author, self.paren_year(m.year)]))

    def format_book(self, m: Citation) -> str:
        """
        APA book format:
        Smith, John (2016). *Deep Work*. Grand Central.
        """
        return self.join([
            self._head(self.authors(m), m),
            self.terminate(self.italicize(m.title)),
            self.terminate(m.publisher),
        ])

    def format_website(self, m: Citation) -> str:
        retrieved = ""
        if m.url:
            retrieved = self.join(["Retrieved", m.access_date, "from", m.url])

        return self.join([
            self._head(self.authors(m), m),
            self.quote(m.title, "."),
            self.terminate(m.website_name),
            retrieved,
        ])

    def format_journal(self, m: Citation) -> str:
        """
        APA journal article format:
        Author (Year). "Title." *Journal Name*, Vol(Issue), pages. https://doi.org/xxx
        """
        container = self.italicize(m.journal_name)
        if m.volume:
            container = self.join([container, m.volume], ", ")
        if m.issue:
            container += f"({m.issue})"
        if m.pages:
            container = self.join([container, m.pages], ", ")

        return self.join([
            self._head(self.authors(m), m),
            self.quote(m.title, "."),
            self.terminate(container),
            self.doi_link(m.doi) or m.url,
        ])

    def format_video(self, m: Citation) -> str:
        title = self.join([self.italicize(m.title), "[Video]"])
        return self.join([
            self._head(self.creator(m, self.authors(m)), m),
            self.terminate(title),
            self.terminate(self.video_platform(m)),
            m.video_url,
        ])
