"""Database engine and session management."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from spicerack.config import get_settings
from spicerack.db.models import Base

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None
logger = logging.getLogger(__name__)


def get_engine(database_path: Path | None = None) -> Engine:
    """Return the shared SQLite engine, creating tables on first use."""
    global _engine, _session_factory

    if _engine is not None:
        return _engine

    db_path = database_path or get_settings().database_path
    db_path.parent.mkdir(parents=True, exist_ok=True)

    _engine = create_engine(f"sqlite:///{db_path}", future=True, echo=False)
    Base.metadata.create_all(_engine)
    _session_factory = sessionmaker(bind=_engine, autoflush=False, autocommit=False, future=True)
    logger.debug("Initialized SQLite database at %s", db_path)
    return _engine


def get_session() -> Session:
    """Return a new SQLAlchemy session."""

    if _session_factory is None:
        get_engine()
    assert _session_factory is not None  # for mypy
    return _session_factory()


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    """Context manager yielding a session with automatic commit/rollback."""
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def reset_repository_state() -> None:
    """Drop the cached engine so the next call reconnects (used by tests)."""

    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


__all__ = ["get_engine", "get_session", "session_scope", "reset_repository_state"]
