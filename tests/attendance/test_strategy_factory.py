from datetime import time

from paystream.attendance.factory import AttendanceStrategyFactory
from paystream.attendance.strategies.late_strategy import LateStrategy
from paystream.attendance.strategies.normal_strategy import NormalStrategy
from paystream.core.enums import AttendanceStatus


def test_factory_checkin_on_cutoff_is_present():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(check_in=time(9, 0, 0), cutoff=time(9, 0, 0))

    assert isinstance(strategy, NormalStrategy)
    assert strategy.decide_checkin(check_in=time(9, 0, 0), cutoff=time(9, 0, 0)).status == AttendanceStatus.PRESENT


def test_factory_checkin_one_second_late():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(check_in=time(9, 0, 1), cutoff=time(9, 0, 0))

    assert isinstance(strategy, LateStrategy)
    decision = strategy.decide_checkin(check_in=time(9, 0, 1), cutoff=time(9, 0, 0))
    assert decision.status == AttendanceStatus.LATE
    assert "09:00:01" in decision.note
