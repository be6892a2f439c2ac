"""Relevance ordering of person search candidates for the selection list.

Blank query: candidates with a photo first, each group in its original order.

Otherwise each candidate scores, for name and english name independently
(both count when both match):
  exact match          +100
  starts with query    +50
  ends with query      +30
plus 10 * len(query) once if either field contains the query. The substring bonus
takes the max over the two fields rather than summing them, unlike the other
components; this is the historical behaviour and is kept as is.

Order: score desc, then photo before no photo, then shorter name first. Python's
sort is stable, so full ties keep their input order.
"""

from typing import Optional, Sequence

from person_notes.schemas.person import SearchCandidate

SCORE_EXACT = 100
SCORE_PREFIX = 50
SCORE_SUFFIX = 30
SCORE_PER_CONTAINED_CHAR = 10


def has_photo(candidate: SearchCandidate) -> bool:
    return bool(candidate.photo_url)


def _field(value: Optional[str]) -> str:
    return (value or "").lower().strip()


def _field_score(field: str, query: str) -> int:
    if not field:
        return 0
    score = 0
    if field == query:
        score += SCORE_EXACT
    if field.startswith(query):
        score += SCORE_PREFIX
    if field.endswith(query):
        score += SCORE_SUFFIX
    return score


def relevance_score(candidate: SearchCandidate, query: str) -> int:
    """Score one candidate; the query is lower-cased and trimmed here."""
    query = _field(query)
    if not query:
        return 0
    name = _field(candidate.name)
    english_name = _field(candidate.english_name)
    score = _field_score(name, query) + _field_score(english_name, query)
    name_contains = len(query) if query in name else 0
    english_contains = len(query) if query in english_name else 0
    score += max(name_contains, english_contains) * SCORE_PER_CONTAINED_CHAR
    return score


def rank_candidates(
    candidates: Sequence[SearchCandidate],
    query: Optional[str] = "",
) -> list[SearchCandidate]:
    """Return a new list with the same candidates, best match first. Never drops items."""
    normalized_query = _field(query)
    if not normalized_query:
        with_photo = [c for c in candidates if has_photo(c)]
        without_photo = [c for c in candidates if not has_photo(c)]
        return with_photo + without_photo

    def sort_key(candidate: SearchCandidate) -> tuple[int, int, int]:
        return (
            -relevance_score(candidate, normalized_query),
            0 if has_photo(candidate) else 1,
            len(candidate.name or ""),
        )

    return sorted(candidates, key=sort_key)
