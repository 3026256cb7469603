"""
Search schemas: index backend response envelope and the paginated result page.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.base import EntityKind


class IndexHit(BaseModel):
    """A single match as returned by the index backend."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    index: str = Field(..., alias="_index")
    type: str = Field("_doc", alias="_type")  # Typeless backends omit it
    id: str = Field(..., alias="_id")
    source: Dict[str, Any] = Field(default_factory=dict, alias="_source")


class IndexHits(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = 0
    hits: List[IndexHit] = Field(default_factory=list)

    @field_validator("total", mode="before")
    @classmethod
    def _unwrap_total(cls, value: Any) -> Any:
        # Newer backends report {"value": n, "relation": "eq"}
        if isinstance(value, dict):
            return value.get("value", 0)
        return value


class IndexSearchResponse(BaseModel):
    """Typed view over the `_search` response body."""
    model_config = ConfigDict(frozen=True)

    hits: IndexHits = Field(default_factory=IndexHits)


class SearchResult(BaseModel):
    """Display-ready search result; extra source fields are kept as-is."""
    model_config = ConfigDict(extra="allow")

    id: str
    type: str
    kind: Optional[EntityKind] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    slug: Optional[str] = None


class Pagination(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_number: int
    per_page: int
    total_matches: int
    total_pages: int


class ResultPage(BaseModel):
    """Response unit for every search entry point."""
    results: List[SearchResult] = Field(default_factory=list)
    pagination: Optional[Pagination] = None
