"""Person record formatting: text cleanup, wiki links, related persons, normalization."""

from .errors import PersonRecordError
from .links import build_link, normalize_folder
from .normalizer import (
    FieldFormat,
    build_image_markup,
    date_only,
    format_values,
    normalize_person,
    process_facts,
)
from .related import (
    EmptyStub,
    FetchPerson,
    IdOnly,
    NameAndId,
    NameOnly,
    classify_stub,
    resolve_related_persons,
)
from .text import collapse_whitespace, fix_photo_url, sanitize_for_metadata, strip_markup

__all__ = [
    "PersonRecordError",
    "build_link",
    "normalize_folder",
    "FieldFormat",
    "build_image_markup",
    "date_only",
    "format_values",
    "normalize_person",
    "process_facts",
    "EmptyStub",
    "FetchPerson",
    "IdOnly",
    "NameAndId",
    "NameOnly",
    "classify_stub",
    "resolve_related_persons",
    "collapse_whitespace",
    "fix_photo_url",
    "sanitize_for_metadata",
    "strip_markup",
]
