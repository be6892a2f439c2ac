from .kinopoisk import (
    KinopoiskConfigError,
    KinopoiskNotFoundError,
    KinopoiskProvider,
    KinopoiskRateLimitError,
    KinopoiskServiceError,
    get_kinopoisk_provider,
)

__all__ = [
    "KinopoiskConfigError",
    "KinopoiskNotFoundError",
    "KinopoiskProvider",
    "KinopoiskRateLimitError",
    "KinopoiskServiceError",
    "get_kinopoisk_provider",
]
