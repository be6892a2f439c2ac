"""Core configuration, constants, and shared infrastructure."""

from person_notes.core.config import Settings, get_settings
from person_notes.core.constants import (
    HTML_ENTITIES,
    KINOPOISK_SITE_URL,
    MAX_ARRAY_ITEMS,
    MAX_FACTS_COUNT,
    SEARCH_RESULT_LIMIT,
)
from person_notes.core.limiter import limiter

__all__ = [
    "Settings",
    "get_settings",
    "HTML_ENTITIES",
    "KINOPOISK_SITE_URL",
    "MAX_ARRAY_ITEMS",
    "MAX_FACTS_COUNT",
    "SEARCH_RESULT_LIMIT",
    "limiter",
]
