from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_month, require_year
from ..core.enums import PayrollStatus
from ..core.exceptions import PersistenceError, ValidationError
from ..employees.model import Employee
from . import engine
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollPreview, PayrollRecord
from .repository import PayrollRepository

log = logging.getLogger(__name__)


class PayrollService:
    """Use case: preview and commit a monthly payroll run."""

    def __init__(
        self,
        payroll: PayrollRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        commit_status: PayrollStatus = PayrollStatus.PROCESSED,
    ):
        if commit_status == PayrollStatus.DRAFT:
            raise ValueError("Committed payroll records cannot be drafts")
        self._payroll = payroll
        self._calculator = calculator or StandardPayrollCalculator()
        self._commit_status = commit_status

    def history(self) -> Sequence[PayrollRecord]:
        return self._payroll.list_all()

    def preview(
        self,
        employees: Sequence[Employee],
        history: Sequence[PayrollRecord],
        month: str,
        year: Any,
        *,
        search_term: str = "",
        now: Optional[datetime] = None,
    ) -> PayrollPreview:
        return engine.preview(
            employees,
            history,
            require_month(month),
            require_year(year),
            search_term=search_term,
            now=now,
            calculator=self._calculator,
        )

    def commit_run(self, drafts: Sequence[PayrollRecord], *, now: Optional[datetime] = None) -> tuple[PayrollRecord, ...]:
        """Persist a batch of drafts; an empty batch is a no-op.

        Raises ``PayrollConflictError`` when the store already holds a record
        for one of the (employee, period) pairs. Nothing is written then, and
        the same batch may be retried once the conflict is resolved.
        """
        if not drafts:
            return ()

        seen: set[tuple[str, str, int]] = set()
        for d in drafts:
            key = (d.employee_id, d.month.lower(), int(d.year))
            if key in seen:
                raise ValidationError(f"Employee {d.employee_id} appears twice in the batch for {d.month} {d.year}")
            seen.add(key)

        stamp = now or now_local()
        records = tuple(d.committed(status=self._commit_status, processed_date=stamp) for d in drafts)

        try:
            self._payroll.commit_run(records)
        except PersistenceError as exc:
            log.warning("Payroll batch of %d record(s) rejected: %s", len(records), exc)
            raise

        log.info(
            "Committed payroll batch: %d record(s), net total %s",
            len(records),
            sum((r.net_pay for r in records), 0.0),
        )
        return records
