"""
Roster use cases: add, remove, look up and adjust employees, plus the audit log.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from roster.core.errors import DuplicateIdError, NotFoundError
from roster.domain.employees import Employee
from roster.services.session_service import SessionGate

logger = logging.getLogger(__name__)


class EmployeeService:
    """In-memory roster guarded by a SessionGate.

    Mutations and the audit view require an authenticated gate. Lookups and
    listings do not.
    """

    def __init__(
        self,
        gate: SessionGate,
        employees: Optional[dict[str, Employee]] = None,
        audit_log: Optional[Iterable[str]] = None,
    ):
        self.gate = gate
        self._employees: dict[str, Employee] = dict(employees or {})
        self._audit_log: list[str] = list(audit_log or [])

    # -------------------------------------- helpers --------------------------------------
    def _record(self, message: str) -> None:
        self._audit_log.append(message)
        logger.info("Audit: %s", message)

    def _lookup(self, employee_id: str) -> Employee:
        employee = self._employees.get(employee_id)
        if employee is None:
            raise NotFoundError(employee_id)
        return employee

    @property
    def employees(self) -> dict[str, Employee]:
        """Live roster mapping, used by the persistence adapters."""
        return self._employees

    @property
    def audit_entries(self) -> list[str]:
        """Raw audit log for persistence; no session check."""
        return list(self._audit_log)

    # -------------------------------------- mutations --------------------------------------
    def add_employee(self, employee: Employee) -> Employee:
        self.gate.require("add_employee")
        if employee.id in self._employees:
            logger.warning("Duplicate employee id '%s'", employee.id)
            raise DuplicateIdError(employee.id)
        self._employees[employee.id] = employee
        self._record(f"Employee {employee.name} added with ID: {employee.id}")
        return employee

    def remove_employee(self, employee_id: str) -> Employee:
        self.gate.require("remove_employee")
        employee = self._lookup(employee_id)
        del self._employees[employee_id]
        self._record(f"Employee {employee.name} removed with ID: {employee_id}")
        return employee

    def update_salary(self, employee_id: str, bonus: float, deduction: float) -> Employee:
        self.gate.require("update_salary")
        employee = self._lookup(employee_id)
        employee.adjust_salary(bonus, deduction)
        self._record(f"Salary updated for employee {employee.name} with ID: {employee_id}")
        return employee

    # -------------------------------------- queries --------------------------------------
    def get_employee(self, employee_id: str) -> Employee:
        return self._lookup(employee_id)

    def list_employees(self) -> list[Employee]:
        return list(self._employees.values())

    def view_audit_log(self) -> list[str]:
        self.gate.require("view_audit_log")
        return list(self._audit_log)
