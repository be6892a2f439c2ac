"""Pydantic person and search schemas."""

from person_notes.schemas.person import (
    PersonStub,
    PersonFact,
    FullPersonRecord,
    SearchCandidate,
    NormalizedPersonRecord,
)
from person_notes.schemas.search import PersonSearchResponse, PersonLookupResponse

__all__ = [
    "PersonStub",
    "PersonFact",
    "FullPersonRecord",
    "SearchCandidate",
    "NormalizedPersonRecord",
    "PersonSearchResponse",
    "PersonLookupResponse",
]
