from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...employees.model import Employee


@dataclass(frozen=True)
class PayBreakdown:
    base_salary: float
    allowances: float
    gifts: float
    deductions: float
    salary_advance: float
    gross_pay: float
    total_deductions: float
    net_pay: float


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Both the payroll engine and the payslip renderer go through this, so the
    amounts on a payslip always agree with the committed record.
    """

    @abstractmethod
    def breakdown(self, employee: Employee) -> PayBreakdown:
        raise NotImplementedError
