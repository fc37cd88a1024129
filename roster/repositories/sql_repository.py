"""Roster persistence backed by SQLAlchemy (intended for a local SQLite file)."""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import SQLAlchemyError

from roster.core.errors import InvalidValueError, StorageError
from roster.db.create_tables import create_all
from roster.db.models import AuditEntryRow, EmployeeRow
from roster.db.session import get_engine, get_session
from roster.domain.employees import Employee
from roster.repositories.results import SaveResult, Snapshot

logger = logging.getLogger(__name__)

# blank DATABASE_URL raises RuntimeError, a missing dialect driver ImportError
_BACKEND_ERRORS = (SQLAlchemyError, RuntimeError, ImportError)


def _row_to_employee(row: EmployeeRow) -> Employee:
    return Employee(
        id=row.id,
        name=row.name,
        department=row.department,
        base_salary=row.base_salary,
        bonus=row.bonus,
        deduction=row.deduction,
    )


class SQLStorage:
    """Replaces the ``employees`` and ``audit_entries`` tables wholesale on every save."""

    def __init__(self, url: Optional[str] = None):
        self.url = url

    def __repr__(self) -> str:
        return f"SQLStorage({self.location!r})"

    @property
    def location(self) -> str:
        try:
            return get_engine(self.url).url.render_as_string(hide_password=True)
        except _BACKEND_ERRORS:
            return self.url or "DATABASE_URL"

    def read(self) -> Snapshot:
        try:
            tables = inspect(get_engine(self.url))
            if not (tables.has_table(EmployeeRow.__tablename__) and tables.has_table(AuditEntryRow.__tablename__)):
                raise StorageError(f"Roster tables not found in {self.location}")
            with get_session(self.url) as session:
                rows = session.execute(select(EmployeeRow).order_by(EmployeeRow.position)).scalars().all()
                messages = session.execute(select(AuditEntryRow.message).order_by(AuditEntryRow.position)).scalars().all()
                employees: dict[str, Employee] = {}
                for row in rows:
                    try:
                        employees[row.id] = _row_to_employee(row)
                    except InvalidValueError as exc:
                        raise StorageError(f"Invalid employee row '{row.id}': {exc.message}") from exc
        except _BACKEND_ERRORS as exc:
            raise StorageError(f"Could not read {self.location}: {exc}") from exc
        return Snapshot(employees=employees, audit_log=list(messages))

    def write(self, employees: Mapping[str, Employee], audit_log: list[str]) -> None:
        try:
            create_all(self.url)
            with get_session(self.url) as session:
                try:
                    session.execute(delete(AuditEntryRow))
                    session.execute(delete(EmployeeRow))
                    session.add_all(
                        EmployeeRow(
                            id=emp.id,
                            name=emp.name,
                            department=emp.department,
                            base_salary=emp.base_salary,
                            bonus=emp.bonus,
                            deduction=emp.deduction,
                            position=index,
                        )
                        for index, emp in enumerate(employees.values())
                    )
                    session.add_all(
                        AuditEntryRow(position=index, message=message)
                        for index, message in enumerate(audit_log)
                    )
                    session.commit()
                except SQLAlchemyError:
                    session.rollback()
                    raise
        except _BACKEND_ERRORS as exc:
            raise StorageError(f"Could not write {self.location}: {exc}") from exc

    def load(self) -> Snapshot:
        try:
            snapshot = self.read()
        except StorageError as exc:
            logger.warning("Starting with an empty roster: %s", exc.message)
            return Snapshot()
        logger.info("Loaded %d employees from %s", len(snapshot.employees), self.location)
        return snapshot

    def save(self, employees: Mapping[str, Employee], audit_log: list[str]) -> SaveResult:
        try:
            self.write(employees, audit_log)
        except StorageError as exc:
            logger.error("Saving roster failed: %s", exc.message)
            return SaveResult(ok=False, location=self.location, error=exc.message)
        logger.info("Saved %d employees to %s", len(employees), self.location)
        return SaveResult(ok=True, location=self.location)
