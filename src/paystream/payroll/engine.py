"""Payroll period reconciliation.

Pure functions over in-memory data: decide who is still owed a payroll run
for a (month, year) period and compute draft records for them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..core.enums import EmploymentStatus, PayrollStatus
from ..employees.model import Employee
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollPartition, PayrollPreview, PayrollRecord

_DEFAULT_CALCULATOR = StandardPayrollCalculator()


def eligible_employees(employees: Iterable[Employee]) -> list[Employee]:
    return [e for e in employees if e.status != EmploymentStatus.TERMINATED]


def is_processed(employee: Employee, history: Iterable[PayrollRecord], month: str, year: int) -> bool:
    return any(r.employee_id == employee.id and r.matches_period(month, year) for r in history)


def records_for_period(history: Iterable[PayrollRecord], month: str, year: int) -> list[PayrollRecord]:
    return [r for r in history if r.matches_period(month, year)]


def partition(
    employees: Sequence[Employee],
    history: Sequence[PayrollRecord],
    month: str,
    year: int,
) -> PayrollPartition:
    """Split the roster into pending employees and the period's history.

    ``pending`` follows the roster (Terminated excluded); the processed side
    follows the history and ignores employee status, so the two need not
    add up to the roster size.
    """
    processed_for_period = records_for_period(history, month, year)
    paid_ids = {r.employee_id for r in processed_for_period}
    pending = [e for e in eligible_employees(employees) if e.id not in paid_ids]
    return PayrollPartition(pending=tuple(pending), processed_for_period=tuple(processed_for_period))


def filter_by_search_term(pending: Iterable[Employee], term: str) -> list[Employee]:
    needle = (term or "").strip().lower()
    if not needle:
        return list(pending)
    return [e for e in pending if needle in e.full_name.lower() or needle in str(e.id).lower()]


def build_drafts(
    pending: Iterable[Employee],
    month: str,
    year: int,
    *,
    now: Optional[datetime] = None,
    calculator: Optional[PayrollCalculator] = None,
) -> list[PayrollRecord]:
    now = now or now_local()
    calculator = calculator or _DEFAULT_CALCULATOR

    drafts = []
    for employee in pending:
        pay = calculator.breakdown(employee)
        drafts.append(
            PayrollRecord(
                id=new_id(),
                employee_id=employee.id,
                month=month,
                year=int(year),
                gross_pay=pay.gross_pay,
                net_pay=pay.net_pay,
                status=PayrollStatus.DRAFT,
                processed_date=now,
            )
        )
    return drafts


def preview(
    employees: Sequence[Employee],
    history: Sequence[PayrollRecord],
    month: str,
    year: int,
    *,
    search_term: str = "",
    now: Optional[datetime] = None,
    calculator: Optional[PayrollCalculator] = None,
) -> PayrollPreview:
    split = partition(employees, history, month, year)
    selected = filter_by_search_term(split.pending, search_term)
    drafts = build_drafts(selected, month, year, now=now, calculator=calculator)
    return PayrollPreview(
        month=month,
        year=int(year),
        processed=split.processed_for_period,
        drafts=tuple(drafts),
        total_net=sum((d.net_pay for d in drafts), 0.0),
    )
