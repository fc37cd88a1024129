#!/usr/bin/env python3
"""
Add one employee to the configured roster storage without the interactive menu.

Usage:
  python scripts/add_employee.py --username admin --id E1 --name Ana --department Sales --base-salary 2000
  (the password is read from --password or prompted for)
"""
from __future__ import annotations

import argparse
import getpass
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.core.config import get_settings  # noqa: E402
from roster.core.errors import RosterError  # noqa: E402
from roster.domain.employees import Employee  # noqa: E402
from roster.repositories import get_storage  # noqa: E402
from roster.services.employee_service import EmployeeService  # noqa: E402
from roster.services.session_service import SessionGate  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Add an employee to the roster")
    ap.add_argument("--username", required=True, help="Admin username")
    ap.add_argument("--password", help="Admin password (prompted when omitted)")
    ap.add_argument("--id", required=True, help="Employee ID (unique)")
    ap.add_argument("--name", required=True, help="Employee name")
    ap.add_argument("--department", required=True, help="Department")
    ap.add_argument("--base-salary", required=True, type=float, help="Base salary (>= 0)")
    args = ap.parse_args()

    settings = get_settings()
    gate = SessionGate.from_settings(settings)
    password = args.password if args.password is not None else getpass.getpass("Admin password: ")
    if not gate.authenticate(args.username, password):
        raise SystemExit("Invalid credentials")

    storage = get_storage(settings)
    snapshot = storage.load()
    service = EmployeeService(gate, snapshot.employees, snapshot.audit_log)
    try:
        employee = service.add_employee(Employee(args.id, args.name, args.department, args.base_salary))
    except RosterError as exc:
        raise SystemExit(exc.message) from exc

    result = storage.save(service.employees, service.audit_entries)
    if not result.ok:
        raise SystemExit(f"Error saving data: {result.error}")
    print("OK: employee added")
    print(f"  {employee}")
    print(f"  Storage: {result.location}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
