"""
High-level use cases for the roster manager.

SessionGate owns the admin login flag; EmployeeService implements the roster
rules (add, remove, salary update, audit trail) and re-checks the gate on every
mutating call. The menu layer calls these services instead of manipulating the
roster or the storage file directly.
"""
