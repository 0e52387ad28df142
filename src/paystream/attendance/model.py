from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """One check-in/out fact, tagged with the device it came from."""

    id: str
    employee_id: str
    employee_name: str
    date: date
    check_in: Optional[time]
    check_out: Optional[time]
    status: AttendanceStatus
    device_source: str = ""
    note: str = ""
