"""
Search index client (Elasticsearch-compatible REST API).
"""

import logging
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError

from .config import settings
from .search_errors import SearchBackendError
from ..schemas.search import IndexSearchResponse

logger = logging.getLogger(__name__)


class SearchIndexClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.SEARCH_INDEX_URL).rstrip("/")
        self.username = username if username is not None else settings.SEARCH_INDEX_USERNAME
        self.password = password if password is not None else settings.SEARCH_INDEX_PASSWORD
        self.timeout = timeout if timeout is not None else settings.SEARCH_INDEX_TIMEOUT_SECONDS
        self.transport = transport

    def _auth(self) -> Optional[httpx.BasicAuth]:
        if self.username and self.password:
            return httpx.BasicAuth(self.username, self.password)
        return None

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, auth=self._auth(), transport=self.transport)

    async def search(self, indices: Sequence[str], body: dict) -> IndexSearchResponse:
        """Run one `_search` request across the given indices."""
        if not indices:
            raise SearchBackendError("No index to search")
        url = f"{self.base_url}/{','.join(indices)}/_search"
        try:
            async with self._client() as client:
                response = await client.post(url, json=body)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            raise SearchBackendError(
                f"Index responded HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise SearchBackendError(f"Index request failed: {exc}") from exc
        except ValueError as exc:
            raise SearchBackendError("Index response is not JSON") from exc

        try:
            return IndexSearchResponse.model_validate(data)
        except ValidationError as exc:
            raise SearchBackendError(f"Unexpected index response: {exc.error_count()} errors") from exc

    async def ping(self) -> bool:
        """True when the cluster root answers with 2xx."""
        try:
            async with self._client() as client:
                response = await client.get(f"{self.base_url}/")
            return response.is_success
        except httpx.HTTPError as exc:
            logger.debug("Index ping failed: %s", exc)
            return False


# Global client
search_index_client = SearchIndexClient()
