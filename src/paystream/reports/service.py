from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.enums import EmploymentStatus
from ..employees.model import Employee
from ..payroll.model import PayrollRecord


@dataclass(frozen=True)
class DepartmentCost:
    name: str
    cost: float


@dataclass(frozen=True)
class DashboardSummary:
    total_employees: int
    active_employees: int
    total_payout: float
    average_salary: float
    outstanding_gifts: float
    outstanding_advances: float
    cost_by_department: tuple[DepartmentCost, ...]


class DashboardService:
    """Headline figures for the overview screen."""

    def summary(self, employees: Sequence[Employee], history: Sequence[PayrollRecord]) -> DashboardSummary:
        total = len(employees)

        by_dept: dict[str, float] = {}
        for e in employees:
            by_dept[e.department] = by_dept.get(e.department, 0.0) + e.base_salary

        return DashboardSummary(
            total_employees=total,
            active_employees=sum(1 for e in employees if e.status == EmploymentStatus.ACTIVE),
            total_payout=sum((r.net_pay for r in history), 0.0),
            average_salary=(sum(e.base_salary for e in employees) / total) if total else 0.0,
            outstanding_gifts=sum((e.gifts for e in employees), 0.0),
            outstanding_advances=sum((e.salary_advance for e in employees), 0.0),
            cost_by_department=tuple(DepartmentCost(name=k, cost=v) for k, v in by_dept.items()),
        )
