from __future__ import annotations

from datetime import date, time

import pytest

from paystream.attendance.service import AttendanceImportService, match_employee
from paystream.core.enums import AttendanceStatus
from paystream.core.exceptions import ValidationError

LOG = "\n".join(
    [
        "EventId,Time,UserId,Name",
        "1,2024-11-04 08:55:10,EMP001,Aarav",
        "2,2024-11-04 09:12:00,EMP002,Priya",
        "3,2024-11-04 09:00:00,emp003,Rohan",
        "4,2024-11-04 08:30:00,UNKNOWN,Ghost",
        "garbage",
        "",
    ]
)


@pytest.fixture
def roster(employee_factory):
    return [
        employee_factory("EMP001"),
        employee_factory("EMP002", first_name="Priya", last_name="Patel"),
        employee_factory("EMP003", first_name="Rohan", last_name="Gupta", email="emp003@paystream.test"),
    ]


def test_match_employee_by_id_then_email(roster):
    assert match_employee(roster, "EMP002").id == "EMP002"
    # Device ids that are part of an email still match.
    assert match_employee(roster, "emp003").id == "EMP003"
    assert match_employee(roster, "") is None
    assert match_employee(roster, "nobody") is None


def test_parse_device_log_classifies_against_cutoff(store, roster):
    svc = AttendanceImportService(store.attendance, late_cutoff=time(9, 0, 0), device_source="DS-TEST")

    entries = svc.parse_device_log(LOG, roster)

    assert [(e.employee_id, e.status) for e in entries] == [
        ("EMP001", AttendanceStatus.PRESENT),
        ("EMP002", AttendanceStatus.LATE),
        ("EMP003", AttendanceStatus.PRESENT),
    ]
    assert entries[0].date == date(2024, 11, 4)
    assert entries[0].check_in == time(8, 55, 10)
    assert entries[0].check_out is None
    assert entries[1].employee_name == "Priya Patel"
    assert all(e.device_source == "DS-TEST" for e in entries)
    assert len({e.id for e in entries}) == 3


def test_parse_device_log_skips_header_even_if_it_matches(store, roster):
    svc = AttendanceImportService(store.attendance)
    text = "1,2024-11-04 08:00:00,EMP001\n2,2024-11-04 08:00:00,EMP002"

    entries = svc.parse_device_log(text, roster)

    assert [e.employee_id for e in entries] == ["EMP002"]


def test_parse_device_log_skips_unparseable_timestamps(store, roster):
    svc = AttendanceImportService(store.attendance)
    text = "header\n1,yesterday morning,EMP001\n2,2024-11-04,EMP002\n3,2024-11-05 07:45,EMP003"

    entries = svc.parse_device_log(text, roster)

    assert [(e.employee_id, e.check_in) for e in entries] == [("EMP003", time(7, 45))]


def test_import_log_persists_entries(store, roster):
    svc = AttendanceImportService(store.attendance)

    entries = svc.import_log(LOG, roster)

    assert store.attendance.rows == entries


def test_import_log_without_matches_raises_and_writes_nothing(store, roster):
    svc = AttendanceImportService(store.attendance)

    with pytest.raises(ValidationError):
        svc.import_log("header\n1,2024-11-04 08:00:00,nobody", roster)

    assert store.attendance.rows == []


def test_late_entries_carry_the_strategy_note(store, roster):
    svc = AttendanceImportService(store.attendance, late_cutoff=time(9, 0, 0))

    late, on_time = svc.parse_device_log("header\n1,2024-11-04 09:12:00,EMP002\n2,2024-11-04 08:59:00,EMP001", roster)

    assert late.note == "Checked in at 09:12:00, after 09:00:00"
    assert on_time.note == ""
