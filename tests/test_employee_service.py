from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.core.errors import (  # noqa: E402
    DuplicateIdError,
    InvalidValueError,
    NotFoundError,
    UnauthorizedError,
)
from roster.core.security import FixedCredentials  # noqa: E402
from roster.domain.employees import Employee  # noqa: E402
from roster.services.employee_service import EmployeeService  # noqa: E402
from roster.services.session_service import SessionGate  # noqa: E402


@pytest.fixture()
def service():
    gate = SessionGate(FixedCredentials("admin", "admin123"))
    gate.authenticate("admin", "admin123")
    return EmployeeService(gate)


def test_add_then_get_returns_same_record(service):
    emp = Employee("E1", "Ana", "Sales", 2000)
    service.add_employee(emp)
    assert service.get_employee("E1") is emp
    assert service.view_audit_log() == ["Employee Ana added with ID: E1"]


def test_duplicate_add_keeps_original(service):
    original = Employee("E1", "Ana", "Sales", 2000)
    service.add_employee(original)

    with pytest.raises(DuplicateIdError):
        service.add_employee(Employee("E1", "Bruno", "Ops", 10))

    assert service.get_employee("E1") is original
    assert service.get_employee("E1").name == "Ana"
    assert len(service.view_audit_log()) == 1


def test_remove_unknown_id(service):
    with pytest.raises(NotFoundError):
        service.remove_employee("nope")
    assert service.view_audit_log() == []


def test_remove_known_id(service):
    service.add_employee(Employee("E1", "Ana", "Sales", 2000))
    removed = service.remove_employee("E1")

    assert removed.id == "E1"
    with pytest.raises(NotFoundError):
        service.get_employee("E1")
    assert service.view_audit_log()[-1] == "Employee Ana removed with ID: E1"


def test_update_salary(service):
    service.add_employee(Employee("E1", "Ana", "Sales", 2000))
    emp = service.update_salary("E1", 500, 100)

    assert emp.salary == 2400
    assert service.get_employee("E1").salary == 2400
    assert service.view_audit_log()[-1] == "Salary updated for employee Ana with ID: E1"


@pytest.mark.parametrize("bonus,deduction", [(-1, 100), (500, -1), (-5, -5)])
def test_update_salary_rejects_negative_without_partial_change(service, bonus, deduction):
    service.add_employee(Employee("E1", "Ana", "Sales", 2000))
    service.update_salary("E1", 30, 10)
    log_before = service.view_audit_log()

    with pytest.raises(InvalidValueError):
        service.update_salary("E1", bonus, deduction)

    emp = service.get_employee("E1")
    assert (emp.bonus, emp.deduction) == (30, 10)
    assert service.view_audit_log() == log_before


def test_update_salary_unknown_id(service):
    with pytest.raises(NotFoundError):
        service.update_salary("nope", 1, 1)


def test_unauthenticated_mutations_change_nothing(service):
    service.add_employee(Employee("E1", "Ana", "Sales", 2000))
    service.gate.deauthenticate()
    entries_before = list(service.audit_entries)

    with pytest.raises(UnauthorizedError):
        service.add_employee(Employee("E2", "Bruno", "Ops", 100))
    with pytest.raises(UnauthorizedError):
        service.remove_employee("E1")
    with pytest.raises(UnauthorizedError):
        service.update_salary("E1", 500, 100)
    with pytest.raises(UnauthorizedError):
        service.view_audit_log()
    # authorization is checked before existence
    with pytest.raises(UnauthorizedError):
        service.remove_employee("missing")

    assert [e.id for e in service.list_employees()] == ["E1"]
    assert service.get_employee("E1").salary == 2000
    assert service.audit_entries == entries_before


def test_reads_do_not_need_a_session():
    gate = SessionGate(FixedCredentials("admin", "admin123"))
    seeded = {"E1": Employee("E1", "Ana", "Sales", 2000)}
    service = EmployeeService(gate, seeded, ["Employee Ana added with ID: E1"])

    assert service.get_employee("E1").name == "Ana"
    assert [e.id for e in service.list_employees()] == ["E1"]


def test_list_is_insertion_ordered_and_empty_is_valid(service):
    assert service.list_employees() == []
    for emp_id in ("C", "A", "B"):
        service.add_employee(Employee(emp_id, f"Name {emp_id}", "Ops", 100))
    assert [e.id for e in service.list_employees()] == ["C", "A", "B"]


def test_audit_log_copy_cannot_shrink_log(service):
    service.add_employee(Employee("E1", "Ana", "Sales", 2000))
    entries = service.view_audit_log()
    entries.clear()
    assert len(service.view_audit_log()) == 1
