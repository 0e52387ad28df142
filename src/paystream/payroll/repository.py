from __future__ import annotations

from typing import Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def list_all(self) -> Sequence[PayrollRecord]:
        """All history, newest ``processed_date`` first."""

        raise NotImplementedError

    def commit_run(self, records: Sequence[PayrollRecord]) -> None:
        """Append ``records`` and zero the accumulators of their employees.

        Both writes belong to one transaction: either every record is stored
        and every accumulator reset, or nothing changes. Raises
        ``PayrollConflictError`` when a record repeats an (employee, period).
        """

        raise NotImplementedError
