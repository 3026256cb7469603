from fastapi import APIRouter, status
import asyncio
from ..core.time_utils import isoformat_or_none, utc_now

from ..core.db import get_session
from ..core.search_backend import search_index_client
from sqlmodel import select
from ..models.base import Artist

router = APIRouter()

# Last known status per dependency
api_status_cache = {
    'search_index': {
        'last_checked': None,
        'is_online': None,
        'last_error': None
    },
    'database': {
        'last_checked': None,
        'is_online': None,
        'last_error': None
    }
}


async def check_search_index() -> bool:
    """Check if the search index answers."""
    try:
        ok = await search_index_client.ping()
        api_status_cache['search_index']['is_online'] = ok
        api_status_cache['search_index']['last_error'] = None if ok else "unreachable"
        return ok
    finally:
        api_status_cache['search_index']['last_checked'] = utc_now()


def check_database() -> bool:
    """Check if database is available."""
    try:
        with get_session() as session:
            # Simple query to test connectivity
            session.exec(select(Artist.id).limit(1)).first()
            api_status_cache['database']['is_online'] = True
            api_status_cache['database']['last_error'] = None
            return True
    except Exception as e:
        api_status_cache['database']['is_online'] = False
        api_status_cache['database']['last_error'] = str(e)
        return False
    finally:
        api_status_cache['database']['last_checked'] = utc_now()


def _service_status(name: str, ok: bool) -> dict:
    return {
        "status": "online" if ok else "offline",
        "last_checked": isoformat_or_none(api_status_cache[name]["last_checked"]),
        "last_error": api_status_cache[name]['last_error']
    }


@router.get("/health", status_code=status.HTTP_200_OK)
async def health() -> dict:
    return {"status": "ok"}


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
async def detailed_health() -> dict:
    """Detailed health check with service status."""
    index_ok, db_ok = await asyncio.gather(check_search_index(), asyncio.to_thread(check_database))

    # Search degrades to empty pages without the index, hydration degrades without the database
    system_status = "online"
    if not (index_ok and db_ok):
        system_status = "degraded" if any([index_ok, db_ok]) else "offline"

    return {
        "status": system_status,
        "services": {
            "search_index": _service_status('search_index', index_ok),
            "database": _service_status('database', db_ok)
        }
    }
