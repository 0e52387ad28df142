from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Type, TypeVar


class EmploymentStatus(str, Enum):
    """Employment state; Terminated employees are never paid."""

    ACTIVE = "Active"
    ON_LEAVE = "On Leave"
    TERMINATED = "Terminated"


class PayrollStatus(str, Enum):
    DRAFT = "Draft"
    PROCESSED = "Processed"
    PAID = "Paid"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    OFF_DAY = "Off-Day"


class LedgerKind(str, Enum):
    """Which accumulator a ledger transaction feeds."""

    ADVANCE = "advance"
    BONUS = "bonus"


E = TypeVar("E", bound=Enum)


def enum_by_value(enum_cls: Type[E], value: Any) -> Optional[E]:
    """Case-insensitive lookup by value or member name; ``None`` if nothing fits."""
    if value is None:
        return None
    text = str(value).strip().lower()
    for member in enum_cls:
        if member.value.lower() == text or member.name.lower() == text:
            return member
    return None
