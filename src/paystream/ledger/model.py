from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import LedgerKind


@dataclass(frozen=True)
class LedgerTransaction:
    """Append-only advance or bonus grant.

    ``employee_name`` is a snapshot taken at grant time.
    """

    id: str
    kind: LedgerKind
    employee_id: str
    employee_name: str
    amount: float
    date: datetime
    reason: str = ""
