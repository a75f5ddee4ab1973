"""
citegen/formatters/ieee.py

IEEE reference formatter, common in engineering and computer science.
"""

from .base import BaseFormatter, register_formatter
from ..models import Citation, CitationStyle


@register_formatter(CitationStyle.IEEE)
class IEEEFormatter(BaseFormatter):
    """
    IEEE formatter.

    Format patterns:
    - Book: Author, *Title*. Publisher, Year.
    - Website: Author, "Title," Website, Year. [Online]. Available: URL. [Accessed: Date].
    - Journal: Author, "Title," *Journal*, vol. X, no. Y, pp. Z, Year. doi: DOI
    - Video: Channel, *Title*, YouTube, Year. [Online Video]. Available: URL
    """

    def _lead(self, author: str) -> str:
        return f"{author}," if author else ""

    def format_book(self, m: Citation) -> str:
        return self.join([
            self._lead(self.authors(m)),
            self.terminate(self.italicize(m.title)),
            self.terminate(self.join([m.publisher, m.year], ", ")),
        ])

    def format_website(self, m: Citation) -> str:
        details = self.join([m.website_name, m.year], ", ")
        return self.join([
            self._lead(self.authors(m)),
            self.quote(m.title, "," if details or m.url else "."),
            self.terminate(details),
            f"[Online]. Available: {self.terminate(m.url)}" if m.url else "",
            f"[Accessed: {m.access_date}]." if m.access_date else "",
        ])

    def format_journal(self, m: Citation) -> str:
        container = self.join([
            self.italicize(m.journal_name),
            f"vol. {m.volume}" if m.volume else "",
            f"no. {m.issue}" if m.issue else "",
            f"pp. {m.pages}" if m.pages else "",
            m.year,
        ], ", ")

        return self.join([
            self._lead(self.authors(m)),
            self.quote(m.title, "," if container else "."),
            self.terminate(container),
            self.doi_link(m.doi, "doi: ") or m.url,
        ])

    def format_video(self, m: Citation) -> str:
        return self.join([
            self._lead(self.creator(m, self.authors(m))),
            f"{self.italicize(m.title)}," if m.title else "",
            self.terminate(self.join([self.video_platform(m), m.year], ", ")),
            f"[Online Video]. Available: {m.video_url}" if m.video_url else "",
        ])
