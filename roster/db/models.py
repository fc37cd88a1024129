"""SQLAlchemy models mirroring the JSON roster document."""
from __future__ import annotations

from sqlalchemy import Column, Float, Integer, String, Text

from .session import Base


class EmployeeRow(Base):
    __tablename__ = "employees"

    id = Column(String(255), primary_key=True)
    name = Column(Text, nullable=False)
    department = Column(Text, nullable=False)
    base_salary = Column(Float, nullable=False)
    bonus = Column(Float, default=0.0, nullable=False)
    deduction = Column(Float, default=0.0, nullable=False)
    # roster insertion order
    position = Column(Integer, nullable=False)


class AuditEntryRow(Base):
    __tablename__ = "audit_entries"

    position = Column(Integer, primary_key=True, autoincrement=False)
    message = Column(Text, nullable=False)
