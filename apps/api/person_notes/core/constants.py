"""Shared formatting and search constants."""

# Every list field of a normalized person is capped at this many items
MAX_ARRAY_ITEMS = 50

# Person facts kept after dropping spoilers
MAX_FACTS_COUNT = 5

# kinopoisk.dev person search page size
SEARCH_RESULT_LIMIT = 30

# Named entities decoded by strip_markup; anything else matching &...; is dropped
HTML_ENTITIES = {
    "&laquo;": "«",
    "&raquo;": "»",
    "&ldquo;": '"',
    "&rdquo;": '"',
    "&lsquo;": "'",
    "&rsquo;": "'",
    "&quot;": '"',
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&nbsp;": " ",
    "&ndash;": "–",
    "&mdash;": "—",
    "&hellip;": "…",
}

# Public person pages: {site}/name/{id}/
KINOPOISK_SITE_URL = "https://www.kinopoisk.ru"
