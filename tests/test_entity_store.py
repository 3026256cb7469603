"""
Tests for projected lookups on the catalog tables.
"""

import pytest

from app.models.base import Album, Artist
from app.services.entity_store import album_store, artist_store


@pytest.fixture
def sample_catalog(db_session):
    artist = Artist(
        id="artist-1",
        name="The Beatles",
        slug_name="the-beatles",
        slug_postfix=0,
        profile_image_url="http://img/beatles.jpg",
    )
    album = Album(
        id="album-1",
        name="Abbey Road",
        slug_name="abbey-road",
        slug_postfix=1,
        cover_image_url=None,
    )
    db_session.add(artist)
    db_session.add(album)
    db_session.commit()
    return artist, album


class TestSQLModelEntityStore:

    def test_projection_returns_requested_fields_only(self, sample_catalog):
        record = artist_store.get_by_id("artist-1", "profile_image_url", "slug_name", "slug_postfix")
        assert record == {
            "profile_image_url": "http://img/beatles.jpg",
            "slug_name": "the-beatles",
            "slug_postfix": 0,
        }

    def test_null_column_is_not_a_missing_row(self, sample_catalog):
        record = album_store.get_by_id("album-1", "cover_image_url")
        assert record == {"cover_image_url": None}

    def test_missing_row_returns_none(self, sample_catalog):
        assert artist_store.get_by_id("nope", "slug_name") is None

    def test_without_fields_returns_whole_row(self, sample_catalog):
        record = album_store.get_by_id("album-1")
        assert record["name"] == "Abbey Road"
        assert record["slug_postfix"] == 1

    def test_unknown_field_is_rejected(self, sample_catalog):
        with pytest.raises(ValueError):
            artist_store.get_by_id("artist-1", "cover_image_url")
