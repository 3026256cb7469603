"""
Name search endpoints over the artist/album index.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..core.search_errors import BackendUnavailable, InvalidArgument
from ..schemas.search import ResultPage
from ..services.search_gateway import SearchGateway, search_gateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


def get_search_gateway() -> SearchGateway:
    return search_gateway


async def _run(search, entry: Optional[str], per_page: Optional[int], page: Optional[int]) -> ResultPage:
    try:
        return await search(entry, per_page, page)
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except BackendUnavailable as exc:
        logger.error("Search backend unavailable: %s", exc)
        raise HTTPException(status_code=503, detail="Search is temporarily unavailable")


@router.get("/", response_model=ResultPage)
async def search_all(
    entry: Optional[str] = Query(None, description="Name entry to search for"),
    per_page: Optional[int] = Query(None, description="Results per page (default 5)"),
    page: Optional[int] = Query(None, description="Page number, starting at 1"),
    gateway: SearchGateway = Depends(get_search_gateway),
) -> ResultPage:
    """Find artists and albums by name entry."""
    return await _run(gateway.search_all, entry, per_page, page)


@router.get("/albums", response_model=ResultPage)
async def search_albums(
    entry: Optional[str] = Query(None, description="Name entry to search for"),
    per_page: Optional[int] = Query(None, description="Results per page (default 5)"),
    page: Optional[int] = Query(None, description="Page number, starting at 1"),
    gateway: SearchGateway = Depends(get_search_gateway),
) -> ResultPage:
    """Find albums by name entry."""
    return await _run(gateway.search_albums, entry, per_page, page)


@router.get("/artists", response_model=ResultPage)
async def search_artists(
    entry: Optional[str] = Query(None, description="Name entry to search for"),
    per_page: Optional[int] = Query(None, description="Results per page (default 5)"),
    page: Optional[int] = Query(None, description="Page number, starting at 1"),
    gateway: SearchGateway = Depends(get_search_gateway),
) -> ResultPage:
    """Find artists by name entry."""
    return await _run(gateway.search_artists, entry, per_page, page)
