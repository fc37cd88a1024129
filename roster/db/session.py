"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from roster.core.config import get_settings

Base = declarative_base()


@lru_cache
def get_engine(url: Optional[str] = None) -> Engine:
    url = (url or get_settings().database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return create_engine(url, future=True, pool_pre_ping=True)


@lru_cache
def _get_sessionmaker(url: Optional[str] = None) -> sessionmaker:
    return sessionmaker(bind=get_engine(url), autoflush=False, autocommit=False, future=True)


@contextmanager
def get_session(url: Optional[str] = None) -> Iterator[Session]:
    session: Session = _get_sessionmaker(url)()
    try:
        yield session
    finally:
        session.close()
