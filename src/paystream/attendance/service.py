from __future__ import annotations

import logging
from datetime import time
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import parse_clock, parse_iso_date
from ..common.ids import new_id
from ..core.constants import DEFAULT_DEVICE_SOURCE, DEFAULT_LATE_CUTOFF
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from .factory import AttendanceStrategyFactory
from .model import AttendanceEntry
from .repository import AttendanceRepository

log = logging.getLogger(__name__)


def match_employee(employees: Iterable[Employee], device_id: str) -> Optional[Employee]:
    """Map a terminal user id to an employee: exact id, else email containing it."""
    if not device_id:
        return None
    for e in employees:
        if e.id == device_id or device_id in (e.email or ""):
            return e
    return None


class AttendanceImportService:
    """Use case: turn a biometric terminal log export into attendance entries.

    Best effort only. Expected rows look like
    ``<event id>,<YYYY-MM-DD HH:MM:SS>,<device user id>,...`` after one header
    line; anything that does not fit is skipped.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        late_cutoff: time = DEFAULT_LATE_CUTOFF,
        device_source: str = DEFAULT_DEVICE_SOURCE,
        strategy_factory: AttendanceStrategyFactory | None = None,
        id_factory: Callable[[], str] = new_id,
    ):
        self._attendance = attendance
        self._late_cutoff = late_cutoff
        self._device_source = device_source
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._new_id = id_factory

    def list_entries(self) -> Sequence[AttendanceEntry]:
        return self._attendance.list_all()

    def parse_device_log(self, text: str, employees: Sequence[Employee]) -> list[AttendanceEntry]:
        entries: list[AttendanceEntry] = []
        for index, line in enumerate((text or "").split("\n")):
            if index == 0 or not line.strip():
                continue
            parts = line.split(",")
            if len(parts) < 3:
                continue

            timestamp = parts[1].strip()
            employee = match_employee(employees, parts[2].strip())
            if not employee or not timestamp:
                continue

            date_part, _, time_part = timestamp.partition(" ")
            try:
                work_date = parse_iso_date(date_part)
                check_in = parse_clock(time_part)
            except ValueError:
                log.debug("Skipping unparseable log line %d: %r", index + 1, line)
                continue

            strategy = self._factory.for_checkin(check_in=check_in, cutoff=self._late_cutoff)
            decision = strategy.decide_checkin(check_in=check_in, cutoff=self._late_cutoff)
            entries.append(
                AttendanceEntry(
                    id=self._new_id(),
                    employee_id=employee.id,
                    employee_name=employee.full_name,
                    date=work_date,
                    check_in=check_in,
                    check_out=None,
                    status=decision.status,
                    device_source=self._device_source,
                    note=decision.note or "",
                )
            )
        return entries

    def import_log(self, text: str, employees: Sequence[Employee]) -> list[AttendanceEntry]:
        entries = self.parse_device_log(text, employees)
        if not entries:
            raise ValidationError(
                "No matching employees found in the log file. "
                "Check that the terminal's user ids match employee ids or emails."
            )
        self._attendance.insert_many(entries)
        log.info("Imported %d attendance entries from %s", len(entries), self._device_source)
        return entries
