from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from ..core.enums import PayrollStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class PayrollRecord:
    """Domain entity: "employee X was paid for (month, year)".

    Drafts exist only in memory; committed records are never mutated.
    """

    id: str
    employee_id: str
    month: str
    year: int
    gross_pay: float
    net_pay: float
    status: PayrollStatus
    processed_date: datetime

    def matches_period(self, month: str, year: int) -> bool:
        return str(self.month or "").lower() == str(month or "").lower() and int(self.year) == int(year)

    def committed(self, *, status: PayrollStatus, processed_date: datetime) -> "PayrollRecord":
        return replace(self, status=status, processed_date=processed_date)


@dataclass(frozen=True)
class PayrollPartition:
    pending: tuple[Employee, ...]
    processed_for_period: tuple[PayrollRecord, ...]


@dataclass(frozen=True)
class PayrollPreview:
    """What the payroll screen shows for one period."""

    month: str
    year: int
    processed: tuple[PayrollRecord, ...]
    drafts: tuple[PayrollRecord, ...]
    total_net: float
