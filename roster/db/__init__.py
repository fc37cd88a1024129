"""Database helpers (engine/session export).

The schema is created on the first SQL save; ``python -m roster.db.create_tables``
creates it up front against ``DATABASE_URL``.
"""

from .session import Base, get_engine, get_session

__all__ = ["Base", "get_engine", "get_session"]
