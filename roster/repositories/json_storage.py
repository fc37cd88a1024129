"""
JSON file persistence adapter.

The whole roster and audit log live in one document:
``{"employees": {id: {...}}, "audit_log": [...]}``. Writes go to a sibling
temporary file that replaces the target, so readers never see half a document.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Mapping

from roster.core.errors import InvalidValueError, StorageError
from roster.domain.employees import Employee
from roster.repositories.results import SaveResult, Snapshot

logger = logging.getLogger(__name__)


def db_defaults(db: dict) -> dict:
    db.setdefault("employees", {})
    db.setdefault("audit_log", [])
    return db


def dump(employees: Mapping[str, Employee], audit_log: list[str]) -> dict:
    return {
        "employees": {emp_id: emp.to_dict() for emp_id, emp in employees.items()},
        "audit_log": list(audit_log),
    }


def parse(db: Any) -> Snapshot:
    """Turn a decoded document back into records, raising StorageError on bad shapes."""
    if not isinstance(db, dict):
        raise StorageError("Storage document must be a JSON object.")
    db = db_defaults(db)
    raw_employees = db["employees"]
    raw_audit = db["audit_log"]
    if not isinstance(raw_employees, dict) or not isinstance(raw_audit, list):
        raise StorageError("Storage document has unexpected 'employees' or 'audit_log' types.")
    if not all(isinstance(entry, str) for entry in raw_audit):
        raise StorageError("Audit log entries must be strings.")

    employees: dict[str, Employee] = {}
    for emp_id, meta in raw_employees.items():
        try:
            employee = Employee.from_dict(meta)
        except InvalidValueError as exc:
            raise StorageError(f"Invalid employee record '{emp_id}': {exc.message}") from exc
        if employee.id != emp_id:
            raise StorageError(f"Employee record keyed '{emp_id}' carries id '{employee.id}'.")
        employees[emp_id] = employee
    return Snapshot(employees=employees, audit_log=list(raw_audit))


class JsonStorage:
    """Reads and writes the roster document at ``path``."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonStorage({str(self.path)!r})"

    def read(self) -> Snapshot:
        """Load the document; raise StorageError when missing or unreadable."""
        if not self.path.exists():
            raise StorageError(f"Data file not found: {self.path}")
        try:
            with self.path.open("r", encoding="utf-8") as f:
                db = json.load(f)
        # ValueError covers JSONDecodeError, bad UTF-8 and oversized integer literals
        except (OSError, ValueError, RecursionError) as exc:
            raise StorageError(f"Could not read {self.path}: {exc}") from exc
        return parse(db)

    def _file_mode(self) -> int:
        """Mode for the replacement file: keep the current one, else what open() would give."""
        if self.path.exists():
            return stat.S_IMODE(self.path.stat().st_mode)
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def write(self, employees: Mapping[str, Employee], audit_log: list[str]) -> None:
        payload = json.dumps(dump(employees, audit_log), ensure_ascii=False, indent=2)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Could not write {self.path}: {exc}") from exc

    def load(self) -> Snapshot:
        """Return the stored snapshot, or an empty one when nothing usable is stored."""
        try:
            snapshot = self.read()
        except StorageError as exc:
            if self.path.exists():
                logger.warning("Ignoring unreadable data file: %s", exc.message)
            else:
                logger.info("No data file at %s, starting empty", self.path)
            return Snapshot()
        logger.info("Loaded %d employees from %s", len(snapshot.employees), self.path)
        return snapshot

    def save(self, employees: Mapping[str, Employee], audit_log: list[str]) -> SaveResult:
        try:
            self.write(employees, audit_log)
        except StorageError as exc:
            logger.error("Saving roster failed: %s", exc.message)
            return SaveResult(ok=False, location=str(self.path), error=exc.message)
        logger.info("Saved %d employees to %s", len(employees), self.path)
        return SaveResult(ok=True, location=str(self.path))
