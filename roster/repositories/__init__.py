"""
Persistence adapters.

These modules encapsulate how the roster and audit log are stored/retrieved
(a JSON file by default, a SQL database through SQLAlchemy when configured).
Services never touch the storage file directly.
"""

from __future__ import annotations

from typing import Optional

from roster.core.config import Settings, get_settings

from .json_storage import JsonStorage
from .results import SaveResult, Snapshot
from .sql_repository import SQLStorage

__all__ = ["JsonStorage", "SQLStorage", "SaveResult", "Snapshot", "get_storage"]


def get_storage(settings: Optional[Settings] = None) -> JsonStorage | SQLStorage:
    """Build the storage adapter selected by ``settings.storage_backend``."""
    settings = settings or get_settings()
    if settings.storage_backend == "sql":
        return SQLStorage(settings.database_url)
    return JsonStorage(settings.data_file)
