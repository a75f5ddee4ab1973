"""
citegen/formatters/chicago.py

Chicago Manual of Style (17th ed.) citation formatter.
This is the default style for history and humanities.
"""

from .base import BaseFormatter, register_formatter
from ..models import Citation, CitationStyle


@register_formatter(CitationStyle.CHICAGO)
class ChicagoFormatter(BaseFormatter):
    """
    Chicago Manual of Style formatter (bibliography entries).

    Format patterns:
    - Book: Author. *Title*. Publisher, Year.
    - Website: Author. "Title." Website. Year. URL
    - Journal: Author. "Title." *Journal* Vol, no. Issue (Year): Pages. DOI
    - Video: Channel. *Title*. YouTube video, Year. URL

    Journal entries always carry a date slot and fall back to "(n.d.)".
    """

    def format_book(self, m: Citation) -> str:
        return self.join([
            self.terminate(self.authors(m)),
            self.terminate(self.italicize(m.title)),
            self.terminate(self.join([m.publisher, m.year], ", ")),
        ])

    def format_website(self, m: Citation) -> str:
        return self.join([
            self.terminate(self.authors(m)),
            self.quote(m.title, "."),
            self.terminate(m.website_name),
            self.terminate(m.year),
            m.url,
        ])

    def format_journal(self, m: Citation) -> str:
        """
        Chicago journal article format:
        Author. "Title." *Journal* Vol, no. Issue (Year): Pages. https://doi.org/xxx
        """
        container = self.join([self.italicize(m.journal_name), m.volume])
        if m.issue:
            container = self.join([container, f"no. {m.issue}"], ", ")
        container = self.join([container, self.paren_year(m.year, self.no_date)])
        if m.pages:
            container += f": {m.pages}"

        return self.join([
            self.terminate(self.authors(m)),
            self.quote(m.title, "."),
            self.terminate(container),
            self.doi_link(m.doi) or m.url,
        ])

    def format_video(self, m: Citation) -> str:
        details = self.join([f"{self.video_platform(m)} video", m.year], ", ")
        return self.join([
            self.terminate(self.creator(m, self.authors(m))),
            self.terminate(self.italicize(m.title)),
            self.terminate(details),
            m.video_url,
        ])
