from typing import Optional

from pydantic import BaseModel

from person_notes.schemas.person import NormalizedPersonRecord, SearchCandidate


class PersonSearchResponse(BaseModel):
    query: str
    refine: str = ""
    candidates: list[SearchCandidate] = []


class PersonLookupResponse(BaseModel):
    """Numeric query => person is filled; otherwise ranked candidates to choose from."""

    query: str
    person: Optional[NormalizedPersonRecord] = None
    candidates: list[SearchCandidate] = []
