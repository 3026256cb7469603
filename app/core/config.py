from pydantic_settings import BaseSettings
from typing import List, Literal, Optional

from ..models.base import EntityKind, PartitionBinding

class Settings(BaseSettings):
    # Load env from .env file
    model_config = {"env_file": ".env"}

    # Database
    DATABASE_URL: str

    # Search index (Elasticsearch REST)
    SEARCH_INDEX_URL: str = "http://localhost:9200"
    SEARCH_INDEX_USERNAME: Optional[str] = None
    SEARCH_INDEX_PASSWORD: Optional[str] = None
    SEARCH_INDEX_TIMEOUT_SECONDS: float = 4.0

    # Index names and document types per entity kind
    ES_ARTISTS_INDEX: str = "artists"
    ES_ARTISTS_TYPE: str = "artist"
    ES_ALBUMS_INDEX: str = "albums"
    ES_ALBUMS_TYPE: str = "album"

    SEARCH_PER_PAGE_DEFAULT: int = 5
    # 'degrade' returns an empty page when the index fails, 'raise' surfaces it
    SEARCH_BACKEND_FAILURE_MODE: Literal["degrade", "raise"] = "degrade"

    def search_partitions(self) -> List[PartitionBinding]:
        """Classification table entries: (index, type tag) -> entity kind."""
        return [
            PartitionBinding(kind=EntityKind.ARTIST, index=self.ES_ARTISTS_INDEX, type_tag=self.ES_ARTISTS_TYPE),
            PartitionBinding(kind=EntityKind.ALBUM, index=self.ES_ALBUMS_INDEX, type_tag=self.ES_ALBUMS_TYPE),
        ]

# Instantiate settings
settings = Settings()
