"""
Name search across the artist and album indices.

Validates the request, runs one match query against the selected indices and
turns the hits into a hydrated, paginated ResultPage.
"""

import asyncio
import logging
from typing import Iterable, Optional

from ..core.config import settings
from ..core.pagination import compute_offset, describe_pagination
from ..core.search_backend import SearchIndexClient, search_index_client
from ..core.search_errors import BackendUnavailable, InvalidArgument, SearchBackendError
from ..core.search_query import build_search_body
from ..models.base import EntityKind
from ..schemas.search import ResultPage
from .hit_classifier import HitClassifier
from .result_hydrator import ResultHydrator, default_sources

logger = logging.getLogger(__name__)

FIRST_PAGE_NUM = 1
FAILURE_MODE_DEGRADE = "degrade"
FAILURE_MODE_RAISE = "raise"


class SearchGateway:
    def __init__(
        self,
        client: SearchIndexClient,
        classifier: HitClassifier,
        hydrator: ResultHydrator,
        per_page_default: int = 5,
        failure_mode: str = FAILURE_MODE_DEGRADE,
    ):
        if failure_mode not in (FAILURE_MODE_DEGRADE, FAILURE_MODE_RAISE):
            raise ValueError(f"Unknown backend failure mode: {failure_mode}")
        self.client = client
        self.classifier = classifier
        self.hydrator = hydrator
        self.per_page_default = per_page_default
        self.failure_mode = failure_mode

    async def search_all(self, name_entry: str, per_page: Optional[int] = None, page: Optional[int] = None) -> ResultPage:
        """Artists and albums whose names match the entry."""
        return await self.search(name_entry, per_page, page)

    async def search_albums(self, name_entry: str, per_page: Optional[int] = None, page: Optional[int] = None) -> ResultPage:
        return await self.search(name_entry, per_page, page, kinds=[EntityKind.ALBUM])

    async def search_artists(self, name_entry: str, per_page: Optional[int] = None, page: Optional[int] = None) -> ResultPage:
        return await self.search(name_entry, per_page, page, kinds=[EntityKind.ARTIST])

    async def search(
        self,
        name_entry: Optional[str],
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        kinds: Optional[Iterable[EntityKind]] = None,
    ) -> ResultPage:
        name_entry = (name_entry or "").strip()
        if not name_entry:
            raise InvalidArgument("Name entry can not be empty")

        if page is None:
            page = FIRST_PAGE_NUM
        if page < 1:
            raise InvalidArgument("Page must be greater than zero")

        if per_page is None:
            per_page = self.per_page_default
        if per_page < 1:
            raise InvalidArgument("Per page value must be greater than zero")

        indices = self.classifier.partitions_for(kinds)
        body = build_search_body(name_entry, compute_offset(page, per_page), per_page)
        logger.debug("Searching %s for %r (page=%s, per_page=%s)", indices, name_entry, page, per_page)

        try:
            response = await self.client.search(indices, body)
        except SearchBackendError as exc:
            if self.failure_mode == FAILURE_MODE_RAISE:
                raise BackendUnavailable(str(exc)) from exc
            logger.warning("Search index unavailable, returning empty page: %s", exc)
            return ResultPage()

        hits = response.hits.hits
        # Store reads are blocking; keep them off the event loop
        classified = [(hit, self.classifier.classify(hit)) for hit in hits]
        results = await asyncio.to_thread(self.hydrator.hydrate_all, classified)
        return ResultPage(
            results=results,
            pagination=describe_pagination(page, per_page, response.hits.total),
        )


def build_search_gateway() -> SearchGateway:
    """Gateway wired to the configured index client and catalog stores."""
    return SearchGateway(
        client=search_index_client,
        classifier=HitClassifier(settings.search_partitions()),
        hydrator=ResultHydrator(default_sources()),
        per_page_default=settings.SEARCH_PER_PAGE_DEFAULT,
        failure_mode=settings.SEARCH_BACKEND_FAILURE_MODE,
    )


# Global gateway
search_gateway = build_search_gateway()
