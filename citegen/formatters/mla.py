"""
citegen/formatters/mla.py

MLA 9th Edition formatter.

MLA style characteristics:
- Two authors joined with "and"; three or more collapse to "First, et al."
- Title in quotes for articles and web pages, italics for books and videos
- Container (journal, website) in italics
- Volume and issue: vol. 45, no. 2
- Year after the container details
- No date placeholder: a missing year is simply left out
"""

from .base import BaseFormatter, register_formatter
from ..models import Citation, CitationStyle


@register_formatter(CitationStyle.MLA)
class MLAFormatter(BaseFormatter):
    """MLA 9th Edition citation formatter."""

    def format_book(self, m: Citation) -> str:
        """
        Pattern:
        Author. *Title of Book*. Publisher, Year.
        """
        return self.join([
            self.terminate(self.authors(m)),
            self.terminate(self.italicize(m.title)),
            self.terminate(self.join([m.publisher, m.year], ", ")),
        ])

    def format_website(self, m: Citation) -> str:
        """
        Pattern:
        Author. "Page Title." *Website*, Year, URL. Accessed Date.
        """
        container = self.join([self.italicize(m.website_name), m.year, m.url], ", ")
        accessed = f"Accessed {m.access_date}." if m.access_date else ""

        return self.join([
            self.terminate(self.authors(m)),
            self.quote(m.title, "."),
            self.terminate(container),
            accessed,
        ])

    def format_journal(self, m: Citation) -> str:
        """
        Pattern:
        Author. "Article Title." *Journal Name*, vol. X, no. Y, Year, pp. X-Y. DOI: xxx
        """
        container = self.join([
            self.italicize(m.journal_name),
            f"vol. {m.volume}" if m.volume else "",
            f"no. {m.issue}" if m.issue else "",
            m.year,
            f"pp. {m.pages}" if m.pages else "",
        ], ", ")

        return self.join([
            self.terminate(self.authors(m)),
            self.quote(m.title, "."),
            self.terminate(container),
            self.doi_link(m.doi, "DOI: ") or m.url,
        ])

    def format_video(self, m: Citation) -> str:
        """
        Pattern:
        *Video Title*. YouTube, uploaded by Channel, Year, URL.
        """
        uploader = self.creator(m, self.authors(m))
        details = self.join([
            self.video_platform(m),
            f"uploaded by {uploader}" if uploader else "",
            m.year,
            m.video_url,
        ], ", ")
        return self.join([self.terminate(self.italicize(m.title)), self.terminate(details)])
