import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from loguru import logger

from facr_scraper.api.docs_page import DOCS_HTML
from facr_scraper.models.club import ClubInfo, SearchResponse
from facr_scraper.models.enums import ClubType
from facr_scraper.normalization.normalizer import NormalizationError
from facr_scraper.scrapers.base_scraper import ScraperError, UpstreamStatusError
from facr_scraper.services.club_service import ClubService

CLUB_ID_PATTERN = re.compile(r"^[0-9a-fA-F-]+$")
INVALID_TYPE_MESSAGE = "Invalid club type. Use 'football' or 'futsal'."

router = APIRouter()


def get_club_service(request: Request) -> ClubService:
    return request.app.state.club_service


def _parse_club_type(value: str) -> ClubType:
    try:
        return ClubType.parse(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_TYPE_MESSAGE)


def _upstream_http_error(error: ScraperError) -> HTTPException:
    """Maps a failed primary fetch or parse to the status the client sees."""
    if isinstance(error, UpstreamStatusError):
        status = error.status_code if error.status_code >= 400 else 502
        return HTTPException(
            status_code=status, detail=f"Error: received status code {error.status_code}"
        )
    return HTTPException(status_code=500, detail=f"Error fetching club data: {error}")


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def docs_page() -> str:
    return DOCS_HTML


@router.get(
    "/club/search", response_model=SearchResponse, response_model_exclude_none=True
)
async def search_clubs(
    q: Optional[str] = None, service: ClubService = Depends(get_club_service)
):
    query = (q or "").strip()
    if not query:
        raise HTTPException(status_code=400, detail="query parameter 'q' is required")
    try:
        return await service.search_clubs(query)
    except UpstreamStatusError as e:
        logger.error(f"Club search for '{query}' failed upstream: {e}")
        raise HTTPException(status_code=e.status_code, detail=f"Error fetching (retry): {e}")
    except ScraperError as e:
        logger.error(f"Club search for '{query}' failed: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching search page: {e}")


@router.get("/club/{club_id}", include_in_schema=False)
async def club_shortcut(club_id: str):
    if not CLUB_ID_PATTERN.match(club_id):
        raise HTTPException(status_code=404, detail="Not Found")
    return RedirectResponse(url=f"/club/football/{club_id}", status_code=301)


@router.get(
    "/club/{club_type}/{club_id}",
    response_model=ClubInfo,
    response_model_exclude_none=True,
)
async def club_info(
    club_type: str, club_id: str, service: ClubService = Depends(get_club_service)
):
    """Club header plus the matches of the club in each of its competitions."""
    parsed_type = _parse_club_type(club_type)
    try:
        return await service.get_club_info(parsed_type, club_id)
    except NormalizationError as e:
        raise HTTPException(status_code=500, detail=f"Error parsing HTML: {e}")
    except ScraperError as e:
        logger.error(f"Club info for {club_id} failed: {e}")
        raise _upstream_http_error(e)


@router.get(
    "/club/{club_type}/{club_id}/table",
    response_model=ClubInfo,
    response_model_exclude_none=True,
)
async def club_tables(
    club_type: str, club_id: str, service: ClubService = Depends(get_club_service)
):
    """Club header plus the overall standings of each competition (no matches)."""
    parsed_type = _parse_club_type(club_type)
    try:
        return await service.get_club_tables(parsed_type, club_id)
    except NormalizationError as e:
        raise HTTPException(status_code=500, detail=f"Error parsing HTML: {e}")
    except ScraperError as e:
        logger.error(f"Club tables for {club_id} failed: {e}")
        raise _upstream_http_error(e)
