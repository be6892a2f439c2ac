"""Person shapes: raw kinopoisk.dev records in, template-ready record out.

Raw models validate API JSON directly (camelCase API names are aliases; the Python
names are accepted too). Optional upstream fields are lenient: numbers may arrive as
int, float or str, and malformed optional values degrade to None/empty rather than
failing the whole record. Only `id` is required.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from pydantic.alias_generators import to_camel

Number = int | float | str


def _int_or_none(v: Any) -> Optional[int]:
    if v is None or isinstance(v, bool):
        return None
    try:
        return int(v)
    except (TypeError, ValueError):
        return None


def _values_list(v: Any) -> list[str]:
    """Accept "a", ["a", "b"] or [{"value": "a"}, ...] and return plain strings."""
    if v is None:
        return []
    if isinstance(v, str):
        return [v]
    if not isinstance(v, (list, tuple)):
        return []
    out: list[str] = []
    for item in v:
        if isinstance(item, dict):
            item = item.get("value")
        if item is None:
            continue
        out.append(str(item))
    return out


class PersonStub(BaseModel):
    """Related-person reference (kinopoisk `spouses` entry). Either field may be missing."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    name: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _lenient_id(cls, v: Any) -> Optional[int]:
        return _int_or_none(v)

    @field_validator("name", mode="before")
    @classmethod
    def _lenient_name(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None


class PersonFact(BaseModel):
    model_config = ConfigDict(extra="ignore")

    value: str = ""
    spoiler: bool = False


class FullPersonRecord(BaseModel):
    """Complete person info from GET /person/{id}."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # Strict: true, "12" and 12.0 are rejected rather than coerced
    id: StrictInt
    name: Optional[str] = None
    english_name: Optional[str] = Field(None, alias="enName")
    sex: Optional[str] = None
    birth_date: Optional[str] = Field(None, alias="birthday")
    death_date: Optional[str] = Field(None, alias="death")
    age: Optional[Number] = None
    height_cm: Optional[Number] = Field(None, alias="growth")
    photo_url: Optional[str] = Field(None, alias="photo")
    description: Optional[str] = None
    profession: list[str] = []
    english_profession: list[str] = Field(default_factory=list, alias="enProfession")
    facts: list[PersonFact] = []
    related_persons: list[PersonStub] = Field(default_factory=list, alias="spouses")

    @field_validator(
        "name", "english_name", "sex", "birth_date", "death_date", "photo_url", "description",
        mode="before",
    )
    @classmethod
    def _lenient_text(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return None

    @field_validator("age", "height_cm", mode="before")
    @classmethod
    def _lenient_number(cls, v: Any) -> Optional[Number]:
        if isinstance(v, bool) or not isinstance(v, (int, float, str)):
            return None
        return v

    @field_validator("profession", "english_profession", mode="before")
    @classmethod
    def _lenient_values(cls, v: Any) -> list[str]:
        return _values_list(v)

    @field_validator("facts", mode="before")
    @classmethod
    def _lenient_facts(cls, v: Any) -> list[Any]:
        if not isinstance(v, (list, tuple)):
            return []
        out: list[Any] = []
        for fact in v:
            if isinstance(fact, str):
                out.append({"value": fact})
            elif isinstance(fact, (dict, PersonFact)):
                out.append(fact)
        return out

    @field_validator("related_persons", mode="before")
    @classmethod
    def _lenient_stubs(cls, v: Any) -> list[Any]:
        """null entries become empty stubs so they are skipped, not rejected."""
        if not isinstance(v, (list, tuple)):
            return []
        return [s if isinstance(s, (dict, PersonStub)) else {} for s in v]


class SearchCandidate(BaseModel):
    """One /person/search result. Immutable: ranking only reorders candidates."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: int
    name: Optional[str] = None
    english_name: Optional[str] = Field(None, alias="enName")
    photo_url: Optional[str] = Field(None, alias="photo")
    sex: Optional[str] = None
    age: Optional[Number] = None
    birthday: Optional[str] = None
    growth: Optional[Number] = None


class NormalizedPersonRecord(BaseModel):
    """Template-ready person.

    Free-text fields are lists of strings so they embed as YAML lists; an empty list
    means the field is absent. Dates and numbers stay scalar strings ("" when absent).
    Serialized with camelCase names (nameArr, relatedPersonLinks, fileSafeName, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name_arr: list[str] = []
    description_arr: list[str] = []
    poster_url_arr: list[str] = []
    poster_markdown_arr: list[str] = []
    kinopoisk_url_arr: list[str] = []
    english_name_arr: list[str] = []
    profession_arr: list[str] = []
    english_profession_arr: list[str] = []
    facts_arr: list[str] = []
    related_person_links: list[str] = []

    sex: str = ""
    birth_date: str = ""
    death_date: str = ""
    age: str = ""
    height_cm: str = ""

    # File naming: cleaned of ':' and unquoted
    file_safe_name: str = ""
    file_safe_english_name: str = ""
