"""Error kinds raised by the roster core. All of them are recoverable."""

from __future__ import annotations


class RosterError(Exception):
    """Base class for roster exceptions."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidValueError(RosterError, ValueError):
    pass


class DuplicateIdError(RosterError):
    def __init__(self, employee_id: str):
        super().__init__(f"Employee with ID {employee_id} already exists.")
        self.employee_id = employee_id


class NotFoundError(RosterError, LookupError):
    def __init__(self, employee_id: str):
        super().__init__(f"Employee with ID {employee_id} not found.")
        self.employee_id = employee_id


class UnauthorizedError(RosterError, PermissionError):
    def __init__(self, message: str = "You must be logged in as an admin to perform this action."):
        super().__init__(message)


class StorageError(RosterError):
    pass
