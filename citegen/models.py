"""
citegen/models.py

Core data models for the citation system.
All modules communicate through these standardized structures.
"""

import random
import string
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from .exceptions import UnknownSourceTypeError, UnknownStyleError


class SourceType(Enum):
    """Category of the cited work."""
    BOOK = "book"
    WEBSITE = "website"
    JOURNAL = "journal"
    VIDEO = "video"

    @classmethod
    def from_string(cls, s: Union[str, "SourceType"]) -> "SourceType":
        """Parse a source type, accepting the enum itself or its value/name."""
        if isinstance(s, cls):
            return s
        if isinstance(s, str):
            key = s.lower().strip()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise UnknownSourceTypeError(s)


class CitationStyle(Enum):
    """Supported citation formatting styles."""
    APA = "apa"
    MLA = "mla"
    CHICAGO = "chicago"
    HARVARD = "harvard"
    IEEE = "ieee"

    @classmethod
    def from_string(cls, s: Union[str, "CitationStyle"]) -> "CitationStyle":
        """Parse style from string, with common aliases."""
        if isinstance(s, cls):
            return s
        if not isinstance(s, str):
            raise UnknownStyleError(s)
        mapping = {
            'apa': cls.APA,
            'apa 7': cls.APA,
            'apa7': cls.APA,
            'mla': cls.MLA,
            'mla 9': cls.MLA,
            'mla9': cls.MLA,
            'chicago': cls.CHICAGO,
            'chicago 17': cls.CHICAGO,
            'chicago manual of style': cls.CHICAGO,
            'harvard': cls.HARVARD,
            'ieee': cls.IEEE,
        }
        key = s.lower().strip()
        if key in mapping:
            return mapping[key]
        for style, name in CITATION_STYLE_NAMES.items():
            if key == name.lower():
                return style
        raise UnknownStyleError(s)

    @property
    def display_name(self) -> str:
        return CITATION_STYLE_NAMES[self]


CITATION_STYLE_NAMES: Dict[CitationStyle, str] = {
    CitationStyle.APA: "APA 7th Edition",
    CitationStyle.MLA: "MLA 9th Edition",
    CitationStyle.CHICAGO: "Chicago 17th Edition",
    CitationStyle.HARVARD: "Harvard",
    CitationStyle.IEEE: "IEEE",
}


def get_style_name(style: Union[str, CitationStyle]) -> str:
    """
    Human-readable name of a style, used for labels and AI prompts.

    Raises:
        UnknownStyleError: if the style is not one of the supported styles
    """
    return CITATION_STYLE_NAMES[CitationStyle.from_string(style)]


class CitationState(Enum):
    """Lifecycle of a citation: Draft -> Formatted -> Stored."""
    DRAFT = "draft"
    FORMATTED = "formatted"
    STORED = "stored"


# Optional fields that carry meaning for each source type
FIELDS_BY_SOURCE_TYPE: Dict[SourceType, Tuple[str, ...]] = {
    SourceType.BOOK: ('publisher', 'pages'),
    SourceType.WEBSITE: ('website_name', 'url', 'access_date'),
    SourceType.JOURNAL: ('journal_name', 'volume', 'issue', 'pages', 'doi'),
    SourceType.VIDEO: ('channel_name', 'video_url'),
}

# camelCase keys used by JSON clients
_CAMEL_ALIASES: Dict[str, str] = {
    'sourceType': 'source_type',
    'websiteName': 'website_name',
    'accessDate': 'access_date',
    'journalName': 'journal_name',
    'channelName': 'channel_name',
    'videoUrl': 'video_url',
}

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 7

_rng = random.SystemRandom()


def generate_citation_id(rng: Optional[random.Random] = None) -> str:
    """Random 7-character base-36 token."""
    rng = rng or _rng
    return ''.join(rng.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


IdFactory = Callable[[], str]


@dataclass
class Citation:
    """
    A structured record of bibliographic facts.

    All text fields are free text and default to empty strings; formatters
    treat an empty field as absent. ``formatted`` caches one rendered string
    per style and can always be recomputed from the other fields.
    """

    id: str = field(default_factory=generate_citation_id)
    source_type: SourceType = SourceType.BOOK

    # Common fields
    authors: str = ""
    title: str = ""
    year: str = ""

    # Book
    publisher: str = ""
    pages: str = ""  # also used by journals
    isbn: str = ""

    # Website
    website_name: str = ""
    url: str = ""
    access_date: str = ""

    # Journal
    journal_name: str = ""
    volume: str = ""
    issue: str = ""
    doi: str = ""

    # Video
    channel_name: str = ""
    video_url: str = ""

    formatted: Dict[CitationStyle, str] = field(default_factory=dict)
    stored: bool = field(default=False, compare=False)

    @property
    def state(self) -> CitationState:
        if self.stored:
            return CitationState.STORED
        if self.formatted:
            return CitationState.FORMATTED
        return CitationState.DRAFT

    def has_minimum_data(self) -> bool:
        """Check if we have enough data to format a citation."""
        return bool(self.authors.strip() and self.title.strip())

    def set_source_type(self, source_type: Union[str, SourceType]) -> None:
        """Change the source type, dropping renderings made under the old one."""
        new_type = SourceType.from_string(source_type)
        if new_type != self.source_type:
            self.source_type = new_type
            self.formatted.clear()

    def update(self, **values: Any) -> "Citation":
        """Set text fields by name (snake_case or camelCase)."""
        for key, value in values.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name == 'source_type':
                self.set_source_type(value)
            elif name in TEXT_FIELDS:
                setattr(self, name, _clean(value))
            else:
                raise AttributeError(f"Citation has no field {key!r}")
        return self

    def relevant_fields(self) -> Dict[str, str]:
        """Non-empty optional fields that apply to this citation's source type."""
        return {
            name: getattr(self, name)
            for name in FIELDS_BY_SOURCE_TYPE[self.source_type]
            if getattr(self, name)
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data: Dict[str, Any] = {
            'id': self.id,
            'source_type': self.source_type.value,
            'state': self.state.value,
        }
        for name in TEXT_FIELDS:
            data[name] = getattr(self, name)
        data['formatted'] = {style.value: text for style, text in self.formatted.items()}
        return data

    @classmethod
    def from_dict(cls, d: Mapping[str, Any], id_factory: Optional[IdFactory] = None) -> "Citation":
        """
        Create from a dictionary.

        Accepts snake_case and camelCase keys; unknown keys are ignored.
        Missing or None values become empty strings.
        """
        values = {_CAMEL_ALIASES.get(k, k): v for k, v in d.items()}

        kwargs: Dict[str, Any] = {name: _clean(values.get(name)) for name in TEXT_FIELDS}
        if values.get('source_type'):
            kwargs['source_type'] = SourceType.from_string(values['source_type'])
        if values.get('id'):
            kwargs['id'] = str(values['id'])
        elif id_factory is not None:
            kwargs['id'] = id_factory()

        formatted = values.get('formatted') or {}
        kwargs['formatted'] = {
            CitationStyle.from_string(style): text for style, text in formatted.items() if text
        }
        return cls(**kwargs)


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


TEXT_FIELDS: Tuple[str, ...] = tuple(
    f.name for f in fields(Citation)
    if f.name not in ('id', 'source_type', 'formatted', 'stored')
)

CitationLike = Union[Citation, Mapping[str, Any]]


def coerce_citation(citation: CitationLike) -> Citation:
    """Accept a Citation or a partial mapping of its fields."""
    if isinstance(citation, Citation):
        return citation
    return Citation.from_dict(citation, id_factory=lambda: "")
