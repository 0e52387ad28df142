from __future__ import annotations

from datetime import time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Check-in after the cutoff."""

    def decide_checkin(self, *, check_in: time, cutoff: time) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.LATE,
            note=f"Checked in at {check_in.strftime('%H:%M:%S')}, after {cutoff.strftime('%H:%M:%S')}",
        )
