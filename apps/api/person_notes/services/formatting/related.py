"""Related persons (spouses) -> link strings.

A stub from the API can carry a name, an id, both, or neither. Stubs are classified
into one of four shapes before resolution so every branch is explicit:

  NameAndId / NameOnly -> link built from the stub itself
  IdOnly               -> name fetched by id through the injected fetch_person callback
  EmptyStub            -> skipped

Fetches run one at a time in source order. A failed fetch skips only that stub.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Sequence, Union

from person_notes.schemas.person import FullPersonRecord, PersonStub

from .links import build_link

logger = logging.getLogger(__name__)

FetchPerson = Callable[[int], Awaitable[FullPersonRecord]]


@dataclass(frozen=True)
class NameAndId:
    name: str
    person_id: int


@dataclass(frozen=True)
class NameOnly:
    name: str


@dataclass(frozen=True)
class IdOnly:
    person_id: int


@dataclass(frozen=True)
class EmptyStub:
    pass


RelatedPersonRef = Union[NameAndId, NameOnly, IdOnly, EmptyStub]


def classify_stub(stub: Optional[PersonStub]) -> RelatedPersonRef:
    if stub is None:
        return EmptyStub()
    has_name = bool(stub.name and stub.name.strip())
    if has_name and stub.id is not None:
        return NameAndId(name=stub.name, person_id=stub.id)
    if has_name:
        return NameOnly(name=stub.name)
    if stub.id is not None:
        return IdOnly(person_id=stub.id)
    return EmptyStub()


async def _fetch_name(fetch_person: FetchPerson, person_id: int) -> Optional[str]:
    try:
        record = await fetch_person(person_id)
    except Exception as e:
        logger.warning("Failed to fetch related person %s, skipping: %s", person_id, e)
        return None
    name = getattr(record, "name", None)
    if not name or not name.strip():
        logger.debug("Related person %s has no name, skipping", person_id)
        return None
    return name


async def resolve_related_persons(
    stubs: Optional[Sequence[Optional[PersonStub]]],
    folder_path: str = "",
    fetch_person: Optional[FetchPerson] = None,
) -> list[str]:
    """Resolve stubs to quoted links, in source order. Skipped stubs are omitted."""
    links: list[str] = []
    for stub in stubs or []:
        ref = classify_stub(stub)
        link: Optional[str] = None
        if isinstance(ref, NameAndId):
            link = build_link(ref.name, person_id=ref.person_id, folder_path=folder_path)
        elif isinstance(ref, NameOnly):
            link = build_link(ref.name, folder_path=folder_path)
        elif isinstance(ref, IdOnly):
            if fetch_person is None:
                continue
            name = await _fetch_name(fetch_person, ref.person_id)
            if name:
                link = build_link(name, person_id=ref.person_id, folder_path=folder_path)
        if link:
            links.append(link)
    return links
