"""Obsidian wiki-link strings for person notes.

Shapes, always double-quoted so they stay valid inside YAML lists:
  id + folder   "[[folder/id|name]]"
  id only       "[[id|name]]"
  folder only   "[[folder/name]]"
  neither       "[[name]]"
"""

from typing import Optional

from .text import sanitize_for_metadata


def normalize_folder(folder_path: Optional[str]) -> str:
    """Blank => ""; one trailing '/' is dropped so links never contain '//'."""
    if not folder_path or not folder_path.strip():
        return ""
    return folder_path[:-1] if folder_path.endswith("/") else folder_path


def build_link(
    name: Optional[str],
    *,
    person_id: Optional[int] = None,
    folder_path: Optional[str] = None,
) -> Optional[str]:
    """Return the quoted link, or None when the cleaned name is empty (caller skips it)."""
    clean_name = sanitize_for_metadata(name)
    if not clean_name:
        return None
    folder = normalize_folder(folder_path)
    if person_id is not None and folder:
        return f'"[[{folder}/{person_id}|{clean_name}]]"'
    if person_id is not None:
        return f'"[[{person_id}|{clean_name}]]"'
    if folder:
        return f'"[[{folder}/{clean_name}]]"'
    return f'"[[{clean_name}]]"'
