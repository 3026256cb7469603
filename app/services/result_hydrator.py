"""
Hydrates raw index hits with display fields (image URL, slug) from the catalog.

The index only holds what is needed to match on; images and slugs live in the
catalog tables and are looked up per hit. A hit without a catalog row is still
returned, just without those fields.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from ..core.slug import construct_slug
from ..models.base import EntityKind
from ..schemas.search import IndexHit, SearchResult
from .entity_store import EntityStore, album_store, artist_store

logger = logging.getLogger(__name__)

SLUG_NAME_FIELD = "slug_name"
SLUG_POSTFIX_FIELD = "slug_postfix"

# Envelope or hydration-owned keys never taken from the indexed source
_RESERVED_SOURCE_KEYS = frozenset({"id", "type", "kind", "image_url", "slug"})


@dataclass(frozen=True)
class HydrationSource:
    """Where to look up an entity kind and which column holds its image."""
    store: EntityStore
    image_field: str


class ResultHydrator:
    def __init__(self, sources: Mapping[EntityKind, HydrationSource]):
        self.sources = dict(sources)

    def hydrate(self, hit: IndexHit, kind: Optional[EntityKind]) -> SearchResult:
        result = self._build_result(hit, kind)

        source = self.sources.get(kind) if kind is not None else None
        if source is None:
            return result

        try:
            record = source.store.get_by_id(hit.id, source.image_field, SLUG_NAME_FIELD, SLUG_POSTFIX_FIELD)
        except Exception as exc:
            logger.warning("Hydration lookup failed for %s %s: %s", kind.value, hit.id, exc)
            return result

        if record is None:
            logger.debug("No catalog row for indexed %s %s", kind.value, hit.id)
            return result

        result.image_url = record.get(source.image_field)
        result.slug = construct_slug(record.get(SLUG_NAME_FIELD), record.get(SLUG_POSTFIX_FIELD))
        return result

    def _build_result(self, hit: IndexHit, kind: Optional[EntityKind]) -> SearchResult:
        fields = {key: value for key, value in hit.source.items() if key not in _RESERVED_SOURCE_KEYS}
        try:
            return SearchResult(id=hit.id, type=hit.type, kind=kind, **fields)
        except ValidationError as exc:
            invalid = {error["loc"][0] for error in exc.errors() if error["loc"]}
            logger.warning("Dropping invalid source fields %s of hit %s", sorted(map(str, invalid)), hit.id)
            fields = {key: value for key, value in fields.items() if key not in invalid}
            return SearchResult(id=hit.id, type=hit.type, kind=kind, **fields)

    def hydrate_all(self, classified: Iterable[Tuple[IndexHit, Optional[EntityKind]]]) -> List[SearchResult]:
        """Hydrate hits one by one, keeping the backend order."""
        return [self.hydrate(hit, kind) for hit, kind in classified]


def default_sources() -> Dict[EntityKind, HydrationSource]:
    return {
        EntityKind.ARTIST: HydrationSource(store=artist_store, image_field="profile_image_url"),
        EntityKind.ALBUM: HydrationSource(store=album_store, image_field="cover_image_url"),
    }
