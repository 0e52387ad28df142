from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, check_in: time, cutoff: time) -> AttendanceStrategy:
        # Exactly on the cutoff still counts as present.
        if check_in > cutoff:
            return LateStrategy()
        return NormalStrategy()
