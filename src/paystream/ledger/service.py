from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import require_positive_amount
from ..core.enums import LedgerKind
from ..core.exceptions import PersistenceError
from ..employees.model import Employee
from .model import LedgerTransaction
from .repository import LedgerRepository

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrantResult:
    transaction: LedgerTransaction
    employee: Employee


def accumulator_of(employee: Employee, kind: LedgerKind) -> float:
    return employee.salary_advance if kind == LedgerKind.ADVANCE else employee.gifts


class LedgerService:
    """Use case: issue salary advances and bonuses.

    A grant appends one ledger row and raises the matching accumulator on the
    employee by the same amount, inside a single store transaction.
    """

    def __init__(self, ledger: LedgerRepository):
        self._ledger = ledger

    def history(self, kind: LedgerKind) -> Sequence[LedgerTransaction]:
        return self._ledger.list_all(kind)

    def issue(
        self,
        kind: LedgerKind,
        employee: Optional[Employee],
        amount: Any,
        reason: str = "",
        *,
        now: Optional[datetime] = None,
    ) -> Optional[GrantResult]:
        if employee is None:
            return None

        amount = require_positive_amount(amount)
        new_total = accumulator_of(employee, kind) + amount
        transaction = LedgerTransaction(
            id=new_id(),
            kind=kind,
            employee_id=employee.id,
            employee_name=employee.full_name,
            amount=amount,
            date=now or now_local(),
            reason=(reason or "").strip(),
        )

        try:
            self._ledger.record_grant(transaction, new_total=new_total)
        except PersistenceError:
            log.warning("Could not record %s of %s for employee %s", kind.value, amount, employee.id)
            raise

        log.info("Issued %s of %s to employee %s (total %s)", kind.value, amount, employee.id, new_total)
        if kind == LedgerKind.ADVANCE:
            updated = employee.with_accumulators(gifts=employee.gifts, salary_advance=new_total)
        else:
            updated = employee.with_accumulators(gifts=new_total, salary_advance=employee.salary_advance)
        return GrantResult(transaction=transaction, employee=updated)

    def issue_advance(self, employee: Optional[Employee], amount: Any, reason: str = "", **kwargs) -> Optional[GrantResult]:
        return self.issue(LedgerKind.ADVANCE, employee, amount, reason, **kwargs)

    def issue_bonus(self, employee: Optional[Employee], amount: Any, reason: str = "", **kwargs) -> Optional[GrantResult]:
        return self.issue(LedgerKind.BONUS, employee, amount, reason, **kwargs)
