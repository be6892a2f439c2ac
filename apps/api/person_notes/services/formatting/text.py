"""Text cleanup for YAML frontmatter values."""

import re

from person_notes.core.constants import HTML_ENTITIES

_TAG_RE = re.compile(r"<[^>]*>")
_ENTITY_RE = re.compile(r"&#?\w+;")
_WHITESPACE_RE = re.compile(r"\s+")
_DOUBLE_SCHEME_RE = re.compile(r"^https:https://")


def sanitize_for_metadata(text: str | None) -> str:
    """Drop ':' (breaks key: value lines) and trim."""
    if not text:
        return ""
    return text.replace(":", "").strip()


def strip_markup(text: str | None) -> str:
    """Remove tags, decode known entities, drop any other entity references."""
    if not text:
        return ""
    # Tags first so entities inside removed tags never reach the output.
    clean = _TAG_RE.sub("", text)
    for entity, char in HTML_ENTITIES.items():
        clean = clean.replace(entity, char)
    clean = _ENTITY_RE.sub("", clean)
    return clean.strip()


def collapse_whitespace(text: str | None) -> str:
    """Newlines and whitespace runs become single spaces."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text.replace("\n", " ")).strip()


def fix_photo_url(url: str | None) -> str:
    """Trim, then collapse kinopoisk.dev's occasional doubled 'https:https://' scheme."""
    url = (url or "").strip()
    if not url:
        return ""
    return _DOUBLE_SCHEME_RE.sub("https://", url)
