"""
Shared fixtures. Environment is set before any `app` module reads settings.
"""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="music-search-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'catalog.db')}"
os.environ["SEARCH_INDEX_URL"] = "http://index.test:9200"
os.environ["SEARCH_BACKEND_FAILURE_MODE"] = "degrade"

import pytest
from sqlmodel import select

from app.core.db import create_db_and_tables, get_session
from app.models.base import Album, Artist


@pytest.fixture
def db_session():
    """Session on a clean catalog; rows are removed afterwards."""
    create_db_and_tables()
    with get_session() as session:
        yield session
        for model in (Artist, Album):
            for row in session.exec(select(model)).all():
                session.delete(row)
        session.commit()


def make_hit(index, doc_type, doc_id, **source):
    """Raw hit in the backend wire format."""
    return {"_index": index, "_type": doc_type, "_id": doc_id, "_source": source}
