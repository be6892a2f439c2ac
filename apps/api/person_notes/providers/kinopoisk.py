import logging
from functools import lru_cache
from typing import Any

import httpx
from pydantic import ValidationError

from person_notes.core import get_settings
from person_notes.core.constants import SEARCH_RESULT_LIMIT
from person_notes.schemas.person import FullPersonRecord, SearchCandidate
from person_notes.services.formatting.text import fix_photo_url

logger = logging.getLogger(__name__)


class KinopoiskServiceError(Exception):
    """Raised when the kinopoisk.dev API fails or returns an unexpected response."""


class KinopoiskConfigError(KinopoiskServiceError):
    """Raised when the API token is missing."""


class KinopoiskRateLimitError(KinopoiskServiceError):
    """Raised when kinopoisk.dev rate-limits the request (daily quota on the free plan)."""


class KinopoiskNotFoundError(KinopoiskServiceError):
    """Raised when the requested person does not exist."""


class KinopoiskProvider:
    """kinopoisk.dev v1.4 person endpoints."""

    def __init__(
        self,
        api_token: str,
        base_url: str = "https://api.kinopoisk.dev/v1.4",
        timeout: float = 10.0,
        search_limit: int = SEARCH_RESULT_LIMIT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_token:
            raise KinopoiskConfigError("You need to enter an API token.")
        self.api_token = api_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.search_limit = search_limit
        self._transport = transport

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = {"Accept": "*/*", "X-API-KEY": self.api_token}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.get(url, params=params, headers=headers)
                if r.status_code == 429:
                    raise KinopoiskRateLimitError("Kinopoisk API rate-limited the request.")
                if r.status_code == 404:
                    raise KinopoiskNotFoundError(f"Kinopoisk returned 404 for {path}.")
                r.raise_for_status()
                return r.json()
        except httpx.HTTPStatusError as e:
            body = getattr(e.response, "text", None) or ""
            if body:
                logger.warning("Kinopoisk API error %s: %s", e.response.status_code, body[:500])
            raise KinopoiskServiceError(
                f"Kinopoisk API returned {e.response.status_code}."
            ) from e
        except httpx.RequestError as e:
            raise KinopoiskServiceError(
                "Kinopoisk API unavailable (timeout or connection error)."
            ) from e
        except ValueError as e:
            raise KinopoiskServiceError("Kinopoisk API returned invalid JSON.") from e

    async def search_persons(self, query: str) -> list[SearchCandidate]:
        """GET /person/search. Photo URLs are repaired; malformed docs are skipped."""
        data = await self._get("person/search", {"query": query, "limit": self.search_limit})
        docs = data.get("docs") if isinstance(data, dict) else None
        if not isinstance(docs, list):
            raise KinopoiskServiceError("Kinopoisk search returned unexpected response format.")
        candidates: list[SearchCandidate] = []
        for i, doc in enumerate(docs):
            if not isinstance(doc, dict):
                logger.warning("Skipping non-dict search doc at index %s: %s", i, type(doc))
                continue
            try:
                candidates.append(
                    SearchCandidate.model_validate({**doc, "photo": fix_photo_url(doc.get("photo"))})
                )
            except ValidationError as e:
                logger.warning("Skipping invalid search doc at index %s: %s", i, e)
        return candidates

    async def get_person(self, person_id: int) -> FullPersonRecord:
        """GET /person/{id}."""
        data = await self._get(f"person/{person_id}")
        try:
            return FullPersonRecord.model_validate(data)
        except ValidationError as e:
            raise KinopoiskServiceError(
                f"Kinopoisk returned unexpected person format for id {person_id}."
            ) from e


@lru_cache
def get_kinopoisk_provider() -> KinopoiskProvider:
    s = get_settings()
    if not s.kinopoisk_api_token:
        raise KinopoiskConfigError(
            "Kinopoisk API not configured. Set KINOPOISK_API_TOKEN in apps/api/.env."
        )
    return KinopoiskProvider(
        api_token=s.kinopoisk_api_token,
        base_url=s.kinopoisk_api_base_url,
        timeout=s.kinopoisk_timeout_seconds,
        search_limit=s.search_result_limit,
    )
