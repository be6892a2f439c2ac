"""Person search, lookup and note data business logic."""

import logging
import re
from typing import TYPE_CHECKING, Optional

from person_notes.core import get_settings
from person_notes.schemas import (
    NormalizedPersonRecord,
    PersonLookupResponse,
    PersonSearchResponse,
)
from person_notes.services.formatting import normalize_person
from person_notes.services.search import rank_candidates

if TYPE_CHECKING:
    from person_notes.providers import KinopoiskProvider

logger = logging.getLogger(__name__)

_NUMERIC_ID_RE = re.compile(r"^\d+$")


class InvalidQueryError(ValueError):
    """Raised when a search or lookup query is blank."""


def is_numeric_id(query: str) -> bool:
    """A query made only of digits is a kinopoisk person id."""
    return bool(_NUMERIC_ID_RE.match((query or "").strip()))


def _clean_query(query: Optional[str]) -> str:
    q = (query or "").strip()
    if not q:
        raise InvalidQueryError("Query must not be empty.")
    return q


class PersonService:
    """Facade over the kinopoisk provider, candidate ranking and normalization."""

    @staticmethod
    async def search(
        provider: "KinopoiskProvider",
        query: str,
        refine: str = "",
    ) -> PersonSearchResponse:
        """Search by name and order candidates against `refine` (blank => photos first)."""
        q = _clean_query(query)
        candidates = await provider.search_persons(q)
        return PersonSearchResponse(
            query=q,
            refine=refine or "",
            candidates=rank_candidates(candidates, refine),
        )

    @staticmethod
    async def get_person(
        provider: "KinopoiskProvider",
        person_id: int,
        folder_path: Optional[str] = None,
    ) -> NormalizedPersonRecord:
        """Fetch a person and normalize it; nameless related persons are fetched by id."""
        s = get_settings()
        record = await provider.get_person(person_id)
        return await normalize_person(
            record,
            s.person_folder if folder_path is None else folder_path,
            provider.get_person,
            max_items=s.max_array_items,
            site_url=s.kinopoisk_site_url,
        )

    @staticmethod
    async def lookup(
        provider: "KinopoiskProvider",
        query: str,
        folder_path: Optional[str] = None,
    ) -> PersonLookupResponse:
        """Resolve a note title: digits => person by id, anything else => ranked search."""
        q = _clean_query(query)
        if is_numeric_id(q):
            logger.info("Fetching person by id %s", q)
            person = await PersonService.get_person(provider, int(q), folder_path)
            return PersonLookupResponse(query=q, person=person)
        logger.info("Searching persons for %r", q)
        found = await PersonService.search(provider, q)
        return PersonLookupResponse(query=q, candidates=found.candidates)


person_service = PersonService()
