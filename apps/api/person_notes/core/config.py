from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from person_notes.core.constants import KINOPOISK_SITE_URL, MAX_ARRAY_ITEMS, SEARCH_RESULT_LIMIT

# Load .env from apps/api so it works regardless of CWD
_env_file = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore")

    # kinopoisk.dev API (free plan token from https://kinopoisk.dev/)
    kinopoisk_api_token: str = ""
    kinopoisk_api_base_url: str = "https://api.kinopoisk.dev/v1.4"
    kinopoisk_site_url: str = KINOPOISK_SITE_URL
    kinopoisk_timeout_seconds: float = 10.0
    search_result_limit: int = SEARCH_RESULT_LIMIT

    # Notes folder used in [[folder/id|name]] links; empty => links without folder
    person_folder: str = ""
    max_array_items: int = MAX_ARRAY_ITEMS

    # Rate limiting (per client IP)
    search_rate_limit: str = "30/minute"
    lookup_rate_limit: str = "30/minute"

    # uvicorn bind address for person-notes-api
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # CORS (comma-separated origins; * allows all)
    cors_origins: str = "*"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parsed CORS origins for middleware."""
        raw = self.cors_origins.strip()
        return ["*"] if not raw else [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
