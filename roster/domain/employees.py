"""Employee record and its field validation."""
from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from roster.core.errors import InvalidValueError

_TEXT_FIELDS = ("id", "name", "department")
_AMOUNT_FIELDS = ("base_salary", "bonus", "deduction")
# set once in __init__, never reassigned afterwards
IMMUTABLE_FIELDS = frozenset({"id", "base_salary"})


def validate_text(field_name: str, value: Any) -> str:
    """Return value when it is a non-blank string, raise InvalidValueError otherwise."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidValueError(f"Employee {field_name} cannot be empty.")
    return value


def validate_amount(field_name: str, value: Any) -> float:
    """Return value as float when it is a finite non-negative number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidValueError(f"Employee {field_name} must be a number.")
    try:
        amount = float(value)
    except (OverflowError, ValueError) as exc:
        raise InvalidValueError(f"Employee {field_name} is out of range.") from exc
    if not math.isfinite(amount):
        raise InvalidValueError(f"Employee {field_name} must be a finite number.")
    if amount < 0:
        label = field_name.replace("_", " ").capitalize()
        raise InvalidValueError(f"{label} cannot be negative.")
    return amount


@dataclass
class Employee:
    """One roster entry.

    Every assignment goes through ``__setattr__``, so a record can never hold
    an empty identity field or a negative salary component. ``id`` and
    ``base_salary`` are fixed once the record is built.
    """

    id: str
    name: str
    department: str
    base_salary: float
    bonus: float = 0.0
    deduction: float = 0.0

    def __setattr__(self, name: str, value: Any) -> None:
        if name in IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"Employee {name} cannot be changed after creation.")
        if name in _TEXT_FIELDS:
            value = validate_text(name, value)
        elif name in _AMOUNT_FIELDS:
            value = validate_amount(name, value)
        object.__setattr__(self, name, value)

    @property
    def salary(self) -> float:
        """Effective salary; may go negative when deductions exceed pay."""
        return self.base_salary + self.bonus - self.deduction

    def adjust_salary(self, bonus: float, deduction: float) -> None:
        """Replace bonus and deduction together, or neither when one is invalid."""
        new_bonus = validate_amount("bonus", bonus)
        new_deduction = validate_amount("deduction", deduction)
        self.bonus = new_bonus
        self.deduction = new_deduction

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        if not isinstance(data, Mapping):
            raise InvalidValueError("Employee data must be a mapping.")
        try:
            return cls(
                id=data["id"],
                name=data["name"],
                department=data["department"],
                base_salary=data["base_salary"],
                bonus=data.get("bonus", 0.0),
                deduction=data.get("deduction", 0.0),
            )
        except KeyError as exc:
            raise InvalidValueError(f"Employee data is missing {exc.args[0]!r}.") from exc

    def __str__(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Department: {self.department}, Salary: ${self.salary:.2f}"
