from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..core.enums import EmploymentStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: a person on the payroll.

    ``gifts`` and ``salary_advance`` are accumulators: they grow with each
    bonus/advance grant and drop back to zero when a payroll run is committed.
    """

    id: str
    first_name: str
    last_name: str
    email: str
    department: str = ""
    position: str = ""
    base_salary: float = 0.0
    allowances: float = 0.0
    deductions: float = 0.0
    gifts: float = 0.0
    salary_advance: float = 0.0
    status: EmploymentStatus = EmploymentStatus.ACTIVE
    joining_date: Optional[date] = None
    bank_account: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def with_accumulators(self, *, gifts: float, salary_advance: float) -> "Employee":
        return replace(self, gifts=gifts, salary_advance=salary_advance)


@dataclass(frozen=True)
class EmployeeInput:
    """Editable employee fields as submitted by an admin."""

    first_name: str
    last_name: str
    email: str
    department: str = ""
    position: str = ""
    base_salary: float = 0.0
    allowances: float = 0.0
    deductions: float = 0.0
    status: EmploymentStatus = EmploymentStatus.ACTIVE
    joining_date: Optional[date] = None
    bank_account: str = ""
