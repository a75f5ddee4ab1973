"""Custom exceptions for citegen."""


class CiteGenError(Exception):
    """Base exception for all citegen errors."""

    pass


class UnknownVariantError(CiteGenError, ValueError):
    """Raised when a style or source-type value is not recognized.

    This is a programmer error: it means an unsupported enumeration value
    reached the formatter, not that the user typed something odd.
    """

    def __init__(self, kind: str, value):
        super().__init__(f"Unknown {kind}: {value!r}")
        self.kind = kind
        self.value = value


class UnknownStyleError(UnknownVariantError):
    """Raised for an unrecognized citation style."""

    def __init__(self, value):
        super().__init__("citation style", value)


class UnknownSourceTypeError(UnknownVariantError):
    """Raised for an unrecognized source type."""

    def __init__(self, value):
        super().__init__("source type", value)


class GenerationError(CiteGenError):
    """Raised when the external text generator fails.

    Covers missing credentials, transport errors, non-2xx responses and
    empty or malformed payloads.
    """

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class CitationNotFoundError(CiteGenError, KeyError):
    """Raised when a citation id is not in the collection."""

    def __init__(self, citation_id: str):
        super().__init__(citation_id)
        self.citation_id = citation_id

    def __str__(self):
        return f"No citation with id {self.citation_id!r}"


class DuplicateCitationError(CiteGenError):
    """Raised when a citation id is already present in the collection."""

    pass


class ValidationError(CiteGenError):
    """Raised when caller input is rejected before any work is done."""

    pass


class DocumentReadError(CiteGenError):
    """Raised when an uploaded document cannot be opened."""

    pass
