from fastapi import HTTPException, status

from person_notes.providers import KinopoiskConfigError, KinopoiskProvider, get_kinopoisk_provider


def get_provider() -> KinopoiskProvider:
    """Configured kinopoisk.dev provider or 503 when the API token is missing."""
    try:
        return get_kinopoisk_provider()
    except KinopoiskConfigError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        ) from e
