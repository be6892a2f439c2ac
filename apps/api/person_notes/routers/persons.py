import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from person_notes.core import get_settings, limiter
from person_notes.dependencies import get_provider
from person_notes.providers import (
    KinopoiskConfigError,
    KinopoiskNotFoundError,
    KinopoiskProvider,
    KinopoiskRateLimitError,
    KinopoiskServiceError,
)
from person_notes.schemas import (
    NormalizedPersonRecord,
    PersonLookupResponse,
    PersonSearchResponse,
)
from person_notes.services import InvalidQueryError, person_service
from person_notes.services.formatting import PersonRecordError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/persons", tags=["persons"])


def _to_http_error(e: Exception) -> HTTPException:
    """Map provider/normalization failures to a single human-readable HTTP error."""
    if isinstance(e, InvalidQueryError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if isinstance(e, KinopoiskConfigError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    if isinstance(e, KinopoiskNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found")
    if isinstance(e, KinopoiskRateLimitError):
        return HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(e))
    if isinstance(e, PersonRecordError):
        logger.warning("Kinopoisk person record rejected: %s", e)
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Kinopoisk returned an invalid person record.",
        )
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@router.get("/search", response_model=PersonSearchResponse)
@limiter.limit(get_settings().search_rate_limit)
async def search_persons(
    request: Request,
    query: str = Query(..., description="Name to search for"),
    refine: str = Query("", description="Text typed in the selection list; blank => photos first"),
    provider: KinopoiskProvider = Depends(get_provider),
):
    try:
        return await person_service.search(provider, query, refine)
    except (InvalidQueryError, KinopoiskServiceError) as e:
        raise _to_http_error(e) from e


@router.get("/lookup", response_model=PersonLookupResponse)
@limiter.limit(get_settings().lookup_rate_limit)
async def lookup_person(
    request: Request,
    query: str = Query(..., description="Note title: a kinopoisk id or a name"),
    folder: str | None = Query(None, description="Notes folder for related-person links"),
    provider: KinopoiskProvider = Depends(get_provider),
):
    try:
        return await person_service.lookup(provider, query, folder)
    except (InvalidQueryError, KinopoiskServiceError, PersonRecordError) as e:
        raise _to_http_error(e) from e


@router.get("/{person_id}", response_model=NormalizedPersonRecord)
async def get_person(
    person_id: int,
    folder: str | None = Query(None, description="Notes folder for related-person links"),
    provider: KinopoiskProvider = Depends(get_provider),
):
    try:
        return await person_service.get_person(provider, person_id, folder)
    except (KinopoiskServiceError, PersonRecordError) as e:
        raise _to_http_error(e) from e
