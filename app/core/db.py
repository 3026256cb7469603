from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import sessionmaker
from sqlmodel import Session, create_engine

from .config import settings
from ..models.base import SQLModel  # Import to access all models


# Single engine instance (avoid recreating per request)
sync_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
sync_engine = create_engine(settings.DATABASE_URL, echo=False, connect_args=sync_connect_args)

SessionLocal = sessionmaker(sync_engine, class_=Session, expire_on_commit=False)


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a database session and always close it."""
    session: Session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_db_and_tables() -> None:
    """
    Create tables if they do not exist.
    Non-destructive: avoids dropping existing data.
    """
    SQLModel.metadata.create_all(sync_engine)
