from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal

import pytest

from paystream.core.enums import AttendanceStatus, EmploymentStatus, LedgerKind, PayrollStatus
from paystream.database.mapping import (
    attendance_entry_from_row,
    employee_from_row,
    ledger_transaction_from_row,
    payroll_record_from_row,
)

SNAKE = {
    "id": "EMP001",
    "first_name": "Aarav",
    "last_name": "Sharma",
    "email": "aarav@paystream.test",
    "department": "Engineering",
    "position": "Lead",
    "base_salary": Decimal("150000"),
    "allowances": 0,
    "deductions": None,
    "gifts": 0,
    "salary_advance": 20000,
    "status": "Active",
    "joining_date": date(2023, 1, 15),
    "bank_account": "HDFC-1",
}
CAMEL = {
    "id": "EMP001",
    "firstName": "Aarav",
    "lastName": "Sharma",
    "email": "aarav@paystream.test",
    "department": "Engineering",
    "position": "Lead",
    "baseSalary": "150000",
    "allowances": "0",
    "gifts": 0,
    "salaryAdvance": "20000",
    "status": "active",
    "joiningDate": "2023-01-15",
    "bankAccount": "HDFC-1",
}
LOWER = {k.lower(): v for k, v in CAMEL.items()}


@pytest.mark.parametrize("row", [SNAKE, CAMEL, LOWER], ids=["snake", "camel", "lower"])
def test_employee_from_row_any_casing(row):
    emp = employee_from_row(row)

    assert emp.full_name == "Aarav Sharma"
    assert emp.base_salary == 150000
    assert emp.salary_advance == 20000
    assert emp.deductions == 0
    assert emp.status == EmploymentStatus.ACTIVE
    assert emp.joining_date == date(2023, 1, 15)
    assert emp.bank_account == "HDFC-1"


def test_employee_unknown_status_falls_back_to_active():
    emp = employee_from_row({**SNAKE, "status": "Retired"})

    assert emp.status == EmploymentStatus.ACTIVE


def test_employee_on_leave_status():
    assert employee_from_row({**SNAKE, "status": "On Leave"}).status == EmploymentStatus.ON_LEAVE


def test_payroll_record_from_row():
    record = payroll_record_from_row(
        {
            "id": "PAY1",
            "employee_id": "EMP001",
            "month": "November",
            "year": 2024,
            "gross_pay": Decimal("150000"),
            "net_pay": Decimal("130000"),
            "status": None,
            "processed_date": "2024-12-01T10:00:00",
        }
    )

    assert record.net_pay == 130000
    assert record.status == PayrollStatus.PAID
    assert record.processed_date == datetime(2024, 12, 1, 10, 0)
    assert record.matches_period("NOVEMBER", 2024)


def test_ledger_transaction_from_row():
    tx = ledger_transaction_from_row(
        {"id": "ADV_001", "employeeId": "EMP001", "employeeName": "Aarav Sharma", "amount": "20000", "date": datetime(2024, 11, 5)},
        LedgerKind.ADVANCE,
    )

    assert tx.kind == LedgerKind.ADVANCE
    assert tx.amount == 20000
    assert tx.reason == ""


def test_attendance_entry_from_row_handles_timedelta_times():
    entry = attendance_entry_from_row(
        {
            "id": "A1",
            "employee_id": "EMP001",
            "employee_name": "Aarav Sharma",
            "date": date(2024, 11, 4),
            "check_in": timedelta(hours=9, minutes=12),
            "check_out": None,
            "status": "Late",
            "device_source": "DS-K1T320MFWX",
        }
    )

    assert entry.check_in == time(9, 12)
    assert entry.check_out is None
    assert entry.status == AttendanceStatus.LATE


def test_unreadable_dates_map_to_none():
    emp = employee_from_row({**SNAKE, "joining_date": "15/01/2023"})
    record = payroll_record_from_row({"id": "PAY1", "employeeId": "EMP001", "processedDate": "yesterday"})
    entry = attendance_entry_from_row({"id": "A1", "date": "2024-11-04", "checkIn": "25:99", "checkOut": "soon"})

    assert emp.joining_date is None
    assert emp.full_name == "Aarav Sharma"
    assert record.processed_date is None
    assert entry.date == date(2024, 11, 4)
    assert (entry.check_in, entry.check_out) == (None, None)


def test_attendance_note_round_trips_from_row():
    entry = attendance_entry_from_row({"id": "A1", "date": "2024-11-04", "note": "Checked in at 09:12:00, after 09:00:00"})

    assert entry.note.startswith("Checked in at 09:12:00")
