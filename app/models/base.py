# Base for SQLModel classes

from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

from ..core.time_utils import utc_now


class EntityKind(str, Enum):
    ARTIST = "artist"
    ALBUM = "album"


class PartitionBinding(BaseModel):
    """One row of the hit classification table."""
    model_config = ConfigDict(frozen=True)

    kind: EntityKind
    index: str
    type_tag: str


class Artist(SQLModel, table=True):
    """Artist as stored in the catalog; the search index mirrors its name."""
    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=200, index=True)
    slug_name: str = Field(default="", max_length=200, index=True)
    slug_postfix: int = Field(default=0)  # 0 when the slug name is unique
    profile_image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Album(SQLModel, table=True):
    """Album as stored in the catalog."""
    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=200, index=True)
    slug_name: str = Field(default="", max_length=200, index=True)
    slug_postfix: int = Field(default=0)
    cover_image_url: Optional[str] = None
    released_date: Optional[str] = None  # YYYY-MM-DD
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
