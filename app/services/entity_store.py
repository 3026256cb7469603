"""
Read-only lookups against the catalog tables used to hydrate search hits.
"""

from typing import Any, Callable, ContextManager, Dict, Optional, Protocol, Type

from sqlmodel import Session, SQLModel, select

from ..core.db import get_session
from ..models.base import Album, Artist


class EntityStore(Protocol):
    def get_by_id(self, entity_id: str, *fields: str) -> Optional[Dict[str, Any]]:
        ...


class SQLModelEntityStore:
    """Projected primary-key lookup on one SQLModel table."""

    def __init__(
        self,
        model: Type[SQLModel],
        session_factory: Callable[[], ContextManager[Session]] = get_session,
    ):
        self.model = model
        self.session_factory = session_factory

    def get_by_id(self, entity_id: str, *fields: str) -> Optional[Dict[str, Any]]:
        """Return the requested columns of the row, or None if there is no such row."""
        for field in fields:
            if field not in self.model.model_fields:
                raise ValueError(f"{self.model.__name__} has no field '{field}'")
        if not fields:
            with self.session_factory() as session:
                record = session.get(self.model, entity_id)
            return record.model_dump() if record is not None else None

        # Primary key is selected too so a NULL column is not mistaken for a missing row
        columns = [self.model.id] + [getattr(self.model, field) for field in fields]
        statement = select(*columns).where(self.model.id == entity_id)
        with self.session_factory() as session:
            row = session.exec(statement).first()
        if row is None:
            return None
        return dict(zip(fields, tuple(row)[1:]))


artist_store = SQLModelEntityStore(Artist)
album_store = SQLModelEntityStore(Album)
