"""Value objects returned by the persistence adapters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from roster.domain.employees import Employee


@dataclass
class Snapshot:
    employees: dict[str, Employee] = field(default_factory=dict)
    audit_log: list[str] = field(default_factory=list)


@dataclass
class SaveResult:
    ok: bool
    location: str
    error: Optional[str] = None
