"""SQLAlchemy session factory helpers."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker


def create_session_factory(database_url: str, *, echo: bool = False) -> sessionmaker[Session]:
    """Create a reusable session factory for the provided database URL."""

    engine = create_engine(database_url, echo=echo)
    return sessionmaker(engine, expire_on_commit=False)
