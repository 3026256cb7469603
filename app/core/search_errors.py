"""
Search error taxonomy.
"""

from typing import Optional


class SearchError(Exception):
    """Base class for search failures surfaced to callers."""


class InvalidArgument(SearchError, ValueError):
    """Rejected search request (empty name entry, page or per_page below 1)."""


class BackendUnavailable(SearchError):
    """The index backend could not answer the query."""


class SearchBackendError(Exception):
    """Transport, status or payload failure talking to the index backend."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
