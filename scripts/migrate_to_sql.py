"""One-off migration script: JSON data file -> SQL database."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the roster package importable when run directly from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.core.config import get_settings  # noqa: E402
from roster.core.errors import StorageError  # noqa: E402
from roster.repositories import JsonStorage, SQLStorage  # noqa: E402


def migrate(data_file: Path, database_url: str) -> int:
    """Copy every employee and audit entry; returns the number of employees copied."""
    try:
        snapshot = JsonStorage(data_file).read()
    except StorageError as exc:
        raise SystemExit(f"Cannot migrate: {exc.message}") from exc

    target = SQLStorage(database_url)
    try:
        target.write(snapshot.employees, snapshot.audit_log)
    except StorageError as exc:
        raise SystemExit(f"Cannot migrate: {exc.message}") from exc
    return len(snapshot.employees)


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy the JSON roster into a SQL database")
    ap.add_argument("--data-file", default=str(settings.data_file), help="Source JSON file")
    ap.add_argument("--database-url", default=settings.database_url, help="Target SQLAlchemy URL")
    args = ap.parse_args()

    count = migrate(Path(args.data_file), args.database_url)
    print(f"JSON data migrated successfully ({count} employees).")


if __name__ == "__main__":
    main()
