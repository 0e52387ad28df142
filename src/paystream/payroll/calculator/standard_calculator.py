from __future__ import annotations

from ...common.fields import to_number
from ...employees.model import Employee
from .base import PayBreakdown, PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: gross = base + allowances + gifts, net = gross - (deductions + advance).

    No rounding and no floor: a negative net pay is reported as is.
    """

    def breakdown(self, employee: Employee) -> PayBreakdown:
        base = to_number(employee.base_salary)
        allowances = to_number(employee.allowances)
        gifts = to_number(employee.gifts)
        deductions = to_number(employee.deductions)
        advance = to_number(employee.salary_advance)

        gross = base + allowances + gifts
        total_deductions = deductions + advance
        return PayBreakdown(
            base_salary=base,
            allowances=allowances,
            gifts=gifts,
            deductions=deductions,
            salary_advance=advance,
            gross_pay=gross,
            total_deductions=total_deductions,
            net_pay=gross - total_deductions,
        )
