"""
Interactive employee portal.

Usage:
  roster [--data-file employees.json] [--storage json|sql] [--database-url URL] [--log-level INFO]

Loads the roster on start, runs the text menu, and saves on exit.
"""
from __future__ import annotations

import argparse
import dataclasses
import getpass
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from roster.core.config import STORAGE_BACKENDS, Settings, get_settings
from roster.core.errors import RosterError, UnauthorizedError
from roster.core.logging_setup import configure_logging
from roster.domain.employees import Employee
from roster.repositories import JsonStorage, SQLStorage, get_storage
from roster.services.employee_service import EmployeeService
from roster.services.session_service import SessionGate

logger = logging.getLogger(__name__)

EXIT_CHOICE = 8


class PortalMenu:
    """Text menu driving an EmployeeService; saves through ``storage`` on exit."""

    def __init__(
        self,
        service: EmployeeService,
        storage: JsonStorage | SQLStorage,
        input_fn: Optional[Callable[[str], str]] = None,
        password_fn: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ):
        self.service = service
        self.storage = storage
        self._input = input_fn or input
        self._password = password_fn or getpass.getpass
        self._out = output or print
        self._actions: dict[int, Callable[[], None]] = {
            1: self.admin_login,
            2: self.logout,
            3: self.add_employee,
            4: self.remove_employee,
            5: self.update_salary,
            6: self.view_all_employees,
            7: self.view_audit_logs,
        }

    # -------------------------------------- input --------------------------------------
    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_number(self, prompt: str) -> float:
        while True:
            raw = self._ask(prompt)
            try:
                return float(raw)
            except ValueError:
                self._out("Please enter a valid number.")

    def _logged_in(self) -> bool:
        if self.service.gate.is_authenticated():
            return True
        self._out(UnauthorizedError().message)
        return False

    # -------------------------------------- screens --------------------------------------
    def display_menu(self) -> None:
        self._out("\nEmployee Portal")
        if not self.service.gate.is_authenticated():
            self._out("1. Admin Login")
        else:
            self._out("2. Logout")
            self._out("3. Add Employee")
            self._out("4. Remove Employee")
            self._out("5. Update Salary")
            self._out("6. View All Employees")
            self._out("7. View Audit Logs")
        self._out(f"{EXIT_CHOICE}. Exit")

    def admin_login(self) -> None:
        if self.service.gate.is_authenticated():
            self._out("Already logged in.")
            return
        username = self._ask("Enter username: ")
        password = self._password("Enter password: ")
        if self.service.gate.authenticate(username, password):
            self._out("Login successful.")
        else:
            self._out("Invalid credentials.")

    def logout(self) -> None:
        self.service.gate.deauthenticate()
        self._out("Logged out successfully.")

    def add_employee(self) -> None:
        if not self._logged_in():
            return
        employee_id = self._ask("Enter employee ID: ")
        name = self._ask("Enter employee name: ")
        department = self._ask("Enter department: ")
        base_salary = self._ask_number("Enter base salary: ")
        employee = Employee(employee_id, name, department, base_salary)
        self.service.add_employee(employee)
        self._out("Employee added successfully.")

    def remove_employee(self) -> None:
        if not self._logged_in():
            return
        employee_id = self._ask("Enter employee ID to remove: ")
        removed = self.service.remove_employee(employee_id)
        self._out(f"Employee {removed.name} removed successfully.")

    def update_salary(self) -> None:
        if not self._logged_in():
            return
        employee_id = self._ask("Enter employee ID: ")
        self.service.get_employee(employee_id)
        bonus = self._ask_number("Enter bonus: ")
        deduction = self._ask_number("Enter deduction: ")
        employee = self.service.update_salary(employee_id, bonus, deduction)
        self._out(f"Salary updated. New salary: ${employee.salary:.2f}")

    def view_all_employees(self) -> None:
        employees = self.service.list_employees()
        if not employees:
            self._out("No employees found.")
            return
        for employee in employees:
            self._out(str(employee))

    def view_audit_logs(self) -> None:
        entries = self.service.view_audit_log()
        if not entries:
            self._out("No audit logs available.")
            return
        for entry in entries:
            self._out(entry)

    def save(self) -> bool:
        result = self.storage.save(self.service.employees, self.service.audit_entries)
        if result.ok:
            self._out("Data saved successfully.")
        else:
            self._out(f"Error saving data: {result.error}")
        return result.ok

    # -------------------------------------- loop --------------------------------------
    def run(self) -> bool:
        """Run until Exit (or end of input), then save. Returns whether the save succeeded."""
        while True:
            self.display_menu()
            try:
                raw = self._ask("Enter your choice: ")
            except EOFError:
                break
            try:
                choice = int(raw)
            except ValueError:
                choice = None
            if choice == EXIT_CHOICE:
                break
            action = self._actions.get(choice) if choice is not None else None
            if action is None:
                self._out("Invalid option, please try again.")
                continue
            try:
                action()
            except RosterError as exc:
                self._out(exc.message)
            except EOFError:
                break
        saved = self.save()
        self._out("Exiting the portal. Goodbye!")
        return saved


def build_settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.data_file:
        overrides["data_file"] = Path(args.data_file).expanduser()
    if args.storage:
        overrides["storage_backend"] = args.storage
    if args.database_url:
        overrides["database_url"] = args.database_url
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    return dataclasses.replace(get_settings(), **overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Employee roster portal")
    ap.add_argument("--data-file", help="JSON data file (default: ROSTER_DATA_FILE or ./employees.json)")
    ap.add_argument("--storage", choices=STORAGE_BACKENDS, help="Storage backend (default: ROSTER_STORAGE or json)")
    ap.add_argument("--database-url", help="SQLAlchemy URL for the sql backend (default: DATABASE_URL)")
    ap.add_argument("--log-level", help="Logging level (default: LOG_LEVEL or WARNING)")
    args = ap.parse_args(argv)

    settings = build_settings(args)
    configure_logging(settings.log_level)
    storage = get_storage(settings)
    snapshot = storage.load()
    service = EmployeeService(SessionGate.from_settings(settings), snapshot.employees, snapshot.audit_log)
    logger.info("Portal started with %d employees (%r)", len(snapshot.employees), storage)

    saved = PortalMenu(service, storage).run()
    return 0 if saved else 1


if __name__ == "__main__":
    sys.exit(main())
