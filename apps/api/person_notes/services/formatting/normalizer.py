"""Full kinopoisk.dev person record -> NormalizedPersonRecord for note templates.

Order matters: related persons are resolved first (the only step that may await the
fetch callback), then the photo URL is repaired before the poster fields are built
from it. Missing optional data yields "" or []; only a bad `id` raises.
"""

import logging
from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from person_notes.core.constants import KINOPOISK_SITE_URL, MAX_ARRAY_ITEMS, MAX_FACTS_COUNT
from person_notes.schemas.person import FullPersonRecord, NormalizedPersonRecord, PersonFact

from .errors import PersonRecordError
from .related import FetchPerson, resolve_related_persons
from .text import collapse_whitespace, fix_photo_url, sanitize_for_metadata, strip_markup

logger = logging.getLogger(__name__)


class FieldFormat(str, Enum):
    SHORT_VALUE = "short"  # cleaned, unquoted (names, professions)
    LONG_TEXT = "long"  # one line, quoted (description)
    URL = "url"  # trimmed, unquoted


def format_values(
    items: Optional[Iterable[Any]],
    field_format: FieldFormat,
    max_items: int = MAX_ARRAY_ITEMS,
) -> list[str]:
    """Format a list field. Blank items are dropped; at most max_items survive, in order."""
    values = [item for item in (items or []) if isinstance(item, str) and item.strip()]
    if field_format is FieldFormat.SHORT_VALUE:
        out = [v for v in (sanitize_for_metadata(item) for item in values) if v]
    elif field_format is FieldFormat.LONG_TEXT:
        out = [f'"{collapse_whitespace(item)}"' for item in values]
    else:
        out = [item.strip() for item in values]
    return out[:max_items]


def build_image_markup(image_path: Optional[str]) -> list[str]:
    """Local path => ![[path]] embed; web URL => ![](url)."""
    if not image_path or not image_path.strip():
        return []
    if not image_path.startswith("http"):
        return [f"![[{image_path}]]"]
    return [f"![]({image_path})"]


def date_only(value: Optional[str]) -> str:
    """'1956-07-09T00:00:00.000Z' -> '1956-07-09'."""
    if not value:
        return ""
    return value.split("T")[0].strip()


def _scalar(value: Any) -> str:
    return "" if value is None else str(value)


def process_facts(facts: Optional[Iterable[PersonFact]], max_facts: int = MAX_FACTS_COUNT) -> list[str]:
    """Drop spoilers and blanks, keep the first max_facts, strip HTML."""
    kept = [f for f in (facts or []) if not f.spoiler and f.value and f.value.strip()]
    out = [strip_markup(f.value) for f in kept[:max_facts]]
    return [f for f in out if f]


def _validated(record: Any) -> FullPersonRecord:
    if isinstance(record, FullPersonRecord):
        person = record
    else:
        try:
            person = FullPersonRecord.model_validate(record)
        except ValidationError as e:
            errors = e.errors()
            loc = errors[0].get("loc") if errors else ()
            field = str(loc[0]) if loc else "record"
            raise PersonRecordError(field, "person record failed validation", e) from e
    # model_construct() bypasses validation; id is still required to build links.
    if isinstance(person.id, bool) or not isinstance(person.id, int):
        raise PersonRecordError("id", f"expected integer id, got {person.id!r}")
    return person


async def normalize_person(
    record: FullPersonRecord | dict,
    folder_path: str = "",
    fetch_person: Optional[FetchPerson] = None,
    *,
    max_items: int = MAX_ARRAY_ITEMS,
    site_url: str = KINOPOISK_SITE_URL,
) -> NormalizedPersonRecord:
    """Build the template-ready record.

    Args:
        record: validated FullPersonRecord or raw API dict.
        folder_path: notes folder for related-person links ("" => no folder).
        fetch_person: async id -> FullPersonRecord, used for related persons without a name.
        max_items: cap applied to every list field.
        site_url: base for kinopoiskUrlArr.

    Raises:
        PersonRecordError: id missing or not an integer.
    """
    person = _validated(record)

    related_links = await resolve_related_persons(person.related_persons, folder_path, fetch_person)

    photo_url = fix_photo_url(person.photo_url)

    result = NormalizedPersonRecord(
        id=person.id,
        name_arr=format_values([person.name], FieldFormat.SHORT_VALUE, max_items),
        description_arr=format_values([person.description], FieldFormat.LONG_TEXT, max_items),
        poster_url_arr=format_values([photo_url], FieldFormat.URL, max_items),
        poster_markdown_arr=build_image_markup(photo_url)[:max_items],
        kinopoisk_url_arr=format_values(
            [f"{site_url.rstrip('/')}/name/{person.id}/"], FieldFormat.URL, max_items
        ),
        english_name_arr=format_values([person.english_name], FieldFormat.SHORT_VALUE, max_items),
        profession_arr=format_values(person.profession, FieldFormat.SHORT_VALUE, max_items),
        english_profession_arr=format_values(
            person.english_profession, FieldFormat.SHORT_VALUE, max_items
        ),
        facts_arr=process_facts(person.facts)[:max_items],
        related_person_links=related_links[:max_items],
        sex=_scalar(person.sex),
        birth_date=date_only(person.birth_date),
        death_date=date_only(person.death_date),
        age=_scalar(person.age),
        height_cm=_scalar(person.height_cm),
        file_safe_name=sanitize_for_metadata(person.name),
        file_safe_english_name=sanitize_for_metadata(person.english_name),
    )
    logger.debug("Normalized person %s with %s related links", person.id, len(related_links))
    return result
