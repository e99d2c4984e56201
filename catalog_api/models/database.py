"""Database setup and session management.

The catalog keeps one module-level engine built from ``settings``; tests and
scripts can build their own with ``make_engine`` and pass it to
``create_tables``. Timestamps are stored as timezone-aware UTC values from
``utcnow``.
"""

from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from catalog_api.config import settings


def make_engine(database_url: str) -> Engine:
    """Create an engine, allowing SQLite connections to cross threads."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = make_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def utcnow() -> datetime:
    """Current time in UTC, used for server-assigned timestamps."""
    return datetime.now(timezone.utc)


def get_db():
    """Yield a request-scoped catalog session, closed afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine | None = None) -> None:
    """Create the catalog tables on ``bind`` (the app engine by default)."""
    # Category, attribute and product modules register their tables on Base
    from catalog_api.models import category, attribute, product  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
