from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import current_period
from ..common.validators import require_month, require_year
from ..core.constants import DEFAULT_CURRENCY_PREFIX
from ..employees.model import Employee
from ..payroll.calculator.base import PayBreakdown, PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator


@dataclass(frozen=True)
class PayslipLine:
    label: str
    amount: float


@dataclass(frozen=True)
class Payslip:
    employee_id: str
    employee_name: str
    position: str
    department: str
    bank_account: str
    month: str
    year: int
    earnings: tuple[PayslipLine, ...]
    deductions: tuple[PayslipLine, ...]
    pay: PayBreakdown


class PayslipService:
    """Builds the monthly salary statement for one employee.

    Uses the same calculator as the payroll engine, so the net figure on a
    payslip is the net figure a commit would record.
    """

    TITLE = "PAYSTREAM PRO"
    SUBTITLE = "Monthly Salary Statement"

    def __init__(
        self,
        *,
        calculator: Optional[PayrollCalculator] = None,
        currency_prefix: str = DEFAULT_CURRENCY_PREFIX,
    ):
        self._calculator = calculator or StandardPayrollCalculator()
        self._currency = currency_prefix

    def build(self, employee: Employee, month: Optional[str] = None, year: Optional[int] = None) -> Payslip:
        default_month, default_year = current_period()
        month = require_month(month) if month else default_month
        year = require_year(year) if year else default_year

        pay = self._calculator.breakdown(employee)

        earnings = [PayslipLine("Basic Salary", pay.base_salary)]
        if pay.allowances > 0:
            earnings.append(PayslipLine("Allowances", pay.allowances))
        if pay.gifts > 0:
            earnings.append(PayslipLine("Bonuses", pay.gifts))

        deductions = []
        if pay.salary_advance > 0:
            deductions.append(PayslipLine("Advance recovery", pay.salary_advance))
        if pay.deductions > 0:
            deductions.append(PayslipLine("Tax / Other", pay.deductions))

        return Payslip(
            employee_id=employee.id,
            employee_name=employee.full_name,
            position=employee.position,
            department=employee.department,
            bank_account=employee.bank_account,
            month=month,
            year=year,
            earnings=tuple(earnings),
            deductions=tuple(deductions),
            pay=pay,
        )

    def money(self, amount: float) -> str:
        sign = "-" if amount < 0 else ""
        return f"{sign}{self._currency} {abs(amount):,.2f}"

    def render_text(self, payslip: Payslip, *, width: int = 60) -> str:
        def row(label: str, value: str) -> str:
            return f"{label} {value.rjust(width - len(label) - 1)}"

        rule = "=" * width
        lines = [
            rule,
            row(self.TITLE, f"PERIOD {payslip.month} {payslip.year}"),
            self.SUBTITLE,
            rule,
            row("Employee", payslip.employee_name),
            row("Position", payslip.position or "-"),
            row("Department", payslip.department or "-"),
            row("Bank account", payslip.bank_account or "-"),
            "-" * width,
            "EARNINGS",
        ]
        lines += [row(f"  {line.label}", self.money(line.amount)) for line in payslip.earnings]
        lines.append(row("Gross Total", self.money(payslip.pay.gross_pay)))
        lines += ["-" * width, "DEDUCTIONS"]
        lines += [row(f"  {line.label}", self.money(-line.amount)) for line in payslip.deductions]
        lines.append(row("Total Deductions", self.money(payslip.pay.total_deductions)))
        lines += [rule, row("NET SALARY PAYABLE", self.money(payslip.pay.net_pay)), rule]
        return "\n".join(lines)
