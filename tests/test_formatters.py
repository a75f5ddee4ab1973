"""Tests for the style formatter matrix."""

import pytest

from citegen.exceptions import UnknownSourceTypeError, UnknownStyleError
from citegen.formatters import (
    APAFormatter, BaseFormatter, format_manual_citation, get_formatter,
)
from citegen.models import TEXT_FIELDS, Citation, CitationStyle, SourceType

ALL_STYLES = list(CitationStyle)
ALL_TYPES = list(SourceType)

FORBIDDEN = ("  ", "()", '""', "undefined", "null", "None", ", ,", " ,")


def assert_clean(text):
    for fragment in FORBIDDEN:
        assert fragment not in text, f"{fragment!r} in {text!r}"
    assert text == text.strip()


class TestEndToEnd:

    def test_apa_book(self, book_fields):
        assert (
            format_manual_citation(book_fields, "book", "apa")
            == "Smith, John (2016). *Deep Work*. Grand Central."
        )

    def test_book_other_styles(self, book_fields):
        assert format_manual_citation(book_fields, "book", "mla") == (
            "Smith, John. *Deep Work*. Grand Central, 2016."
        )
        assert format_manual_citation(book_fields, "book", "chicago") == (
            "Smith, John. *Deep Work*. Grand Central, 2016."
        )
        assert format_manual_citation(book_fields, "book", "harvard") == (
            "Smith, John (2016) *Deep Work*. Grand Central."
        )
        assert format_manual_citation(book_fields, "book", "ieee") == (
            "Smith, John, *Deep Work*. Grand Central, 2016."
        )


class TestJournal:

    def test_apa(self, journal_citation):
        assert format_manual_citation(journal_citation, "journal", "apa") == (
            'Alice Adams & Bob Brown (2017). "Attention Is All You Need." '
            '*Neural Computation*, 30(4), 1-15. https://doi.org/10.1000/xyz123'
        )

    def test_mla(self, journal_citation):
        assert format_manual_citation(journal_citation, "journal", "mla") == (
            'Alice Adams, and Bob Brown. "Attention Is All You Need." '
            '*Neural Computation*, vol. 30, no. 4, 2017, pp. 1-15. DOI: 10.1000/xyz123'
        )

    def test_chicago(self, journal_citation):
        assert format_manual_citation(journal_citation, "journal", "chicago") == (
            'Alice Adams, and Bob Brown. "Attention Is All You Need." '
            '*Neural Computation* 30, no. 4 (2017): 1-15. https://doi.org/10.1000/xyz123'
        )

    def test_harvard(self, journal_citation):
        assert format_manual_citation(journal_citation, "journal", "harvard") == (
            'Alice Adams & Bob Brown (2017) "Attention Is All You Need," '
            '*Neural Computation*, 30(4), pp. 1-15. doi: 10.1000/xyz123'
        )

    def test_ieee(self, journal_citation):
        assert format_manual_citation(journal_citation, "journal", "ieee") == (
            'Alice Adams and Bob Brown, "Attention Is All You Need," '
            '*Neural Computation*, vol. 30, no. 4, pp. 1-15, 2017. doi: 10.1000/xyz123'
        )

    def test_url_used_without_doi(self, journal_citation):
        journal_citation.doi = ""
        journal_citation.url = "https://example.com/paper"
        assert format_manual_citation(journal_citation, "journal", "apa").endswith(
            "1-15. https://example.com/paper"
        )

    def test_doi_link_left_alone(self, journal_citation):
        journal_citation.doi = "https://doi.org/10.1000/xyz123"
        text = format_manual_citation(journal_citation, "journal", "apa")
        assert text.endswith(" https://doi.org/10.1000/xyz123")
        assert "doi.org/https" not in text

    def test_styles_are_distinct(self, journal_citation):
        outputs = {format_manual_citation(journal_citation, "journal", s) for s in ALL_STYLES}
        assert len(outputs) == len(ALL_STYLES)


class TestWebsite:

    def test_apa(self, website_citation):
        assert format_manual_citation(website_citation, "website", "apa") == (
            'Jane Doe (2023). "Why Tests Matter." Dev Blog. '
            'Retrieved March 5, 2024 from https://devblog.example.com/why-tests-matter'
        )

    def test_mla(self, website_citation):
        assert format_manual_citation(website_citation, "website", "mla") == (
            'Jane Doe. "Why Tests Matter." *Dev Blog*, 2023, '
            'https://devblog.example.com/why-tests-matter. Accessed March 5, 2024.'
        )

    def test_chicago(self, website_citation):
        assert format_manual_citation(website_citation, "website", "chicago") == (
            'Jane Doe. "Why Tests Matter." Dev Blog. 2023. '
            'https://devblog.example.com/why-tests-matter'
        )

    def test_harvard(self, website_citation):
        assert format_manual_citation(website_citation, "website", "harvard") == (
            'Jane Doe (2023) "Why Tests Matter." [online] Dev Blog. '
            'Available at: https://devblog.example.com/why-tests-matter [Accessed March 5, 2024].'
        )

    def test_ieee(self, website_citation):
        assert format_manual_citation(website_citation, "website", "ieee") == (
            'Jane Doe, "Why Tests Matter," Dev Blog, 2023. '
            '[Online]. Available: https://devblog.example.com/why-tests-matter. '
            '[Accessed: March 5, 2024].'
        )


class TestVideo:

    def test_apa(self, video_citation):
        assert format_manual_citation(video_citation, "video", "apa") == (
            "CodeChannel (2020). *Intro to Python* [Video]. YouTube. "
            "https://www.youtube.com/watch?v=abc"
        )

    def test_mla(self, video_citation):
        assert format_manual_citation(video_citation, "video", "mla") == (
            "*Intro to Python*. YouTube, uploaded by CodeChannel, 2020, "
            "https://www.youtube.com/watch?v=abc."
        )

    def test_ieee(self, video_citation):
        assert format_manual_citation(video_citation, "video", "ieee") == (
            "CodeChannel, *Intro to Python*, YouTube, 2020. "
            "[Online Video]. Available: https://www.youtube.com/watch?v=abc"
        )

    def test_harvard(self, video_citation):
        assert format_manual_citation(video_citation, "video", "harvard") == (
            "CodeChannel (2020) *Intro to Python*. [video] "
            "Available at: https://www.youtube.com/watch?v=abc"
        )

    def test_vimeo_label(self, video_citation):
        video_citation.video_url = "https://vimeo.com/12345"
        assert format_manual_citation(video_citation, "video", "chicago") == (
            "CodeChannel. *Intro to Python*. Vimeo video, 2020. https://vimeo.com/12345"
        )

    def test_authors_when_no_channel(self, video_citation):
        video_citation.channel_name = ""
        video_citation.authors = "Guido Rossum"
        assert format_manual_citation(video_citation, "video", "apa").startswith(
            "Guido Rossum (2020). *Intro to Python* [Video]."
        )


class TestTitleDecoration:
    """Standalone works are italicized, contained works are quoted."""

    @pytest.mark.parametrize("style", ALL_STYLES)
    def test_article_title_quoted(self, journal_citation, style):
        text = format_manual_citation(journal_citation, "journal", style)
        assert '"Attention Is All You Need' in text
        assert "*Neural Computation*" in text

    @pytest.mark.parametrize("style", ALL_STYLES)
    def test_book_title_italic(self, book_fields, style):
        assert "*Deep Work*" in format_manual_citation(book_fields, "book", style)

    @pytest.mark.parametrize("style", ALL_STYLES)
    def test_page_title_quoted(self, website_citation, style):
        assert '"Why Tests Matter' in format_manual_citation(website_citation, "website", style)

    @pytest.mark.parametrize("style", ALL_STYLES)
    def test_video_title_italic(self, video_citation, style):
        text = format_manual_citation(video_citation, "video", style)
        assert "*Intro to Python*" in text
        assert '"Intro to Python' not in text


class TestMissingYear:

    def test_apa_omits_year(self):
        assert format_manual_citation({"authors": "Jane Doe", "title": "T"}, "book", "apa") == (
            "Jane Doe. *T*."
        )

    def test_mla_omits_year(self):
        assert format_manual_citation(
            {"authors": "Jane Doe", "title": "T", "publisher": "P"}, "book", "mla"
        ) == "Jane Doe. *T*. P."

    def test_harvard_placeholder(self):
        assert format_manual_citation({"authors": "Jane Doe", "title": "T"}, "book", "harvard") == (
            "Jane Doe (n.d.) *T*."
        )

    def test_chicago_journal_placeholder(self, journal_citation):
        journal_citation.year = ""
        assert "*Neural Computation* 30, no. 4 (n.d.): 1-15." in format_manual_citation(
            journal_citation, "journal", "chicago"
        )

    def test_ieee_omits_year(self, book_fields):
        book_fields["year"] = ""
        assert format_manual_citation(book_fields, "book", "ieee") == (
            "Smith, John, *Deep Work*. Grand Central."
        )


class TestPunctuation:

    def test_et_al_not_doubled(self):
        text = format_manual_citation({"authors": "A, B, C", "title": "T"}, "book", "mla")
        assert text == "A, et al. *T*."

    def test_question_title_not_doubled(self, website_citation):
        website_citation.title = "Why Test?"
        text = format_manual_citation(website_citation, "website", "apa")
        assert '"Why Test?"' in text
        assert "?." not in text

    def test_italic_question_title_not_doubled(self):
        text = format_manual_citation({"authors": "A", "title": "Why?"}, "book", "apa")
        assert text == "A. *Why?*"


class TestGracefulOmission:

    @pytest.mark.parametrize("style", ALL_STYLES)
    @pytest.mark.parametrize("source_type", ALL_TYPES)
    def test_full_record_is_clean(self, full_citation, style, source_type):
        assert_clean(format_manual_citation(full_citation, source_type, style))

    @pytest.mark.parametrize("style", ALL_STYLES)
    @pytest.mark.parametrize("source_type", ALL_TYPES)
    def test_each_field_omitted(self, full_citation, style, source_type):
        for name in TEXT_FIELDS:
            partial = full_citation.to_dict()
            partial[name] = ""
            assert_clean(format_manual_citation(partial, source_type, style))

    @pytest.mark.parametrize("style", ALL_STYLES)
    @pytest.mark.parametrize("source_type", ALL_TYPES)
    def test_empty_record(self, style, source_type):
        assert_clean(format_manual_citation({}, source_type, style))


class TestDeterminism:

    @pytest.mark.parametrize("style", ALL_STYLES)
    @pytest.mark.parametrize("source_type", ALL_TYPES)
    def test_same_input_same_output(self, full_citation, style, source_type):
        first = format_manual_citation(full_citation, source_type, style)
        second = format_manual_citation(full_citation, source_type, style)
        assert first == second

    def test_mapping_and_citation_agree(self, journal_citation):
        assert format_manual_citation(journal_citation.to_dict(), "journal", "mla") == (
            format_manual_citation(journal_citation, "journal", "mla")
        )

    def test_formatting_does_not_mutate(self, journal_citation):
        before = journal_citation.to_dict()
        format_manual_citation(journal_citation, "journal", "apa")
        assert journal_citation.to_dict() == before


class TestRegistry:

    def test_every_style_registered(self):
        for style in ALL_STYLES:
            formatter = get_formatter(style)
            assert isinstance(formatter, BaseFormatter)
            assert formatter.style == style

    def test_lookup_by_alias(self):
        assert isinstance(get_formatter("APA 7"), APAFormatter)

    def test_unknown_style(self, book_fields):
        with pytest.raises(UnknownStyleError):
            format_manual_citation(book_fields, "book", "vancouver")

    def test_unknown_source_type(self, book_fields):
        with pytest.raises(UnknownSourceTypeError):
            format_manual_citation(book_fields, "podcast", "apa")

    def test_source_type_argument_overrides(self):
        citation = Citation(source_type=SourceType.BOOK, title="T", website_name="Site")
        assert get_formatter("chicago").format(citation, "website") == '"T." Site.'
