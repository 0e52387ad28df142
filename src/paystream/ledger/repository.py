from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import LedgerKind
from .model import LedgerTransaction


class LedgerRepository(Protocol):
    def list_all(self, kind: LedgerKind) -> Sequence[LedgerTransaction]:
        """Transactions of one kind, newest first."""

        raise NotImplementedError

    def record_grant(self, transaction: LedgerTransaction, *, new_total: float) -> None:
        """Append ``transaction`` and set the employee's accumulator to ``new_total``.

        The ledger insert runs first and both writes share one transaction.
        """

        raise NotImplementedError
