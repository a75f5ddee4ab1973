"""Shared fixtures for the citegen test suite."""

import itertools
from datetime import date

import pytest

from citegen.models import Citation, SourceType


class FakeGenerator:
    """Records prompts and answers with a fixed reply."""

    def __init__(self, reply="Generated citation.", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def today():
    return date(2024, 3, 5)


@pytest.fixture
def counter_ids():
    """Deterministic id factory: id1, id2, ..."""
    counter = itertools.count(1)
    return lambda: f"id{next(counter)}"


@pytest.fixture
def book_fields():
    return {
        "authors": "Smith, John",
        "title": "Deep Work",
        "year": "2016",
        "publisher": "Grand Central",
        "sourceType": "book",
    }


@pytest.fixture
def journal_citation():
    return Citation(
        id="j1",
        source_type=SourceType.JOURNAL,
        authors="Alice Adams, Bob Brown",
        title="Attention Is All You Need",
        year="2017",
        journal_name="Neural Computation",
        volume="30",
        issue="4",
        pages="1-15",
        doi="10.1000/xyz123",
    )


@pytest.fixture
def website_citation():
    return Citation(
        id="w1",
        source_type=SourceType.WEBSITE,
        authors="Jane Doe",
        title="Why Tests Matter",
        year="2023",
        website_name="Dev Blog",
        url="https://devblog.example.com/why-tests-matter",
        access_date="March 5, 2024",
    )


@pytest.fixture
def video_citation():
    return Citation(
        id="v1",
        source_type=SourceType.VIDEO,
        title="Intro to Python",
        year="2020",
        channel_name="CodeChannel",
        video_url="https://www.youtube.com/watch?v=abc",
    )


@pytest.fixture
def full_citation():
    """Every text field populated."""
    return Citation(
        id="full",
        authors="Alice Adams, Bob Brown, Carol Clark",
        title="Complete Record",
        year="2021",
        publisher="Example Press",
        pages="10-20",
        isbn="978-0-00-000000-0",
        website_name="Example Site",
        url="https://example.com/complete-record",
        access_date="March 5, 2024",
        journal_name="Journal of Examples",
        volume="7",
        issue="2",
        doi="10.5555/example.2021",
        channel_name="Example Channel",
        video_url="https://www.youtube.com/watch?v=xyz",
    )


@pytest.fixture
def make_generator():
    return FakeGenerator
