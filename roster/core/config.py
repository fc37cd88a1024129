"""
Configuration helpers for the roster manager.

Exposes a Settings object that reads environment variables (storage location,
backend, admin credential, log level) so that services and repositories do not
fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

STORAGE_BACKENDS = ("json", "sql")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: Path
    storage_backend: str
    database_url: str
    admin_username: str
    admin_password: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _backend(value: str | None) -> str:
        backend = (value or "").strip().lower()
        return backend if backend in STORAGE_BACKENDS else "json"

    def _path(value: str | None, default: str) -> Path:
        return Path((value or "").strip() or default).expanduser()

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=_path(os.getenv("ROSTER_DATA_FILE"), "employees.json"),
        storage_backend=_backend(os.getenv("ROSTER_STORAGE")),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///employees.db").strip(),
        admin_username=os.getenv("ROSTER_ADMIN_USERNAME", "admin"),
        admin_password=os.getenv("ROSTER_ADMIN_PASSWORD", "admin123"),
        log_level=(os.getenv("LOG_LEVEL") or "WARNING").upper(),
    )
