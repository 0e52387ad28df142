"""Row -> domain mapping at the persistence boundary.

This is the only place that deals with the store's key casing: every field
is read through ``get_field``/``get_number`` so a row keyed ``baseSalary``,
``basesalary`` or ``base_salary`` maps to the same ``Employee``. Past this
module everything is a typed dataclass.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Type, TypeVar

from ..attendance.model import AttendanceEntry
from ..common.fields import MISSING, get_field, get_number, get_text
from ..core.enums import AttendanceStatus, EmploymentStatus, LedgerKind, PayrollStatus, enum_by_value
from ..employees.model import Employee
from ..ledger.model import LedgerTransaction
from ..payroll.model import PayrollRecord
from .mysql_base import normalize_mysql_date, normalize_mysql_datetime, normalize_mysql_time

log = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _enum(enum_cls: Type[E], value: Any, default: E) -> E:
    if value is MISSING or value is None:
        return default
    member = enum_by_value(enum_cls, value)
    if member is not None:
        return member
    log.warning("Unknown %s value %r, using %s", enum_cls.__name__, value, default.value)
    return default


def _optional(value: Any) -> Any:
    return None if value is MISSING else value


def _temporal(normalize: Callable[[Any], Any], row: Mapping[str, Any], name: str) -> Optional[Any]:
    value = _optional(get_field(row, name))
    try:
        return normalize(value)
    except (TypeError, ValueError):
        log.warning("Unreadable %s value %r on row %r, treating as empty", name, value, get_text(row, "id"))
        return None


def employee_from_row(row: Mapping[str, Any]) -> Employee:
    return Employee(
        id=get_text(row, "id"),
        first_name=get_text(row, "firstName"),
        last_name=get_text(row, "lastName"),
        email=get_text(row, "email"),
        department=get_text(row, "department"),
        position=get_text(row, "position"),
        base_salary=get_number(row, "baseSalary"),
        allowances=get_number(row, "allowances"),
        deductions=get_number(row, "deductions"),
        gifts=get_number(row, "gifts"),
        salary_advance=get_number(row, "salaryAdvance"),
        status=_enum(EmploymentStatus, get_field(row, "status"), EmploymentStatus.ACTIVE),
        joining_date=_temporal(normalize_mysql_date, row, "joiningDate"),
        bank_account=get_text(row, "bankAccount"),
    )


def payroll_record_from_row(row: Mapping[str, Any]) -> PayrollRecord:
    return PayrollRecord(
        id=get_text(row, "id"),
        employee_id=get_text(row, "employeeId"),
        month=get_text(row, "month"),
        year=int(get_number(row, "year")),
        gross_pay=get_number(row, "grossPay"),
        net_pay=get_number(row, "netPay"),
        status=_enum(PayrollStatus, get_field(row, "status"), PayrollStatus.PAID),
        processed_date=_temporal(normalize_mysql_datetime, row, "processedDate"),
    )


def ledger_transaction_from_row(row: Mapping[str, Any], kind: LedgerKind) -> LedgerTransaction:
    return LedgerTransaction(
        id=get_text(row, "id"),
        kind=kind,
        employee_id=get_text(row, "employeeId"),
        employee_name=get_text(row, "employeeName"),
        amount=get_number(row, "amount"),
        date=_temporal(normalize_mysql_datetime, row, "date"),
        reason=get_text(row, "reason"),
    )


def attendance_entry_from_row(row: Mapping[str, Any]) -> AttendanceEntry:
    return AttendanceEntry(
        id=get_text(row, "id"),
        employee_id=get_text(row, "employeeId"),
        employee_name=get_text(row, "employeeName"),
        date=_temporal(normalize_mysql_date, row, "date"),
        check_in=_temporal(normalize_mysql_time, row, "checkIn"),
        check_out=_temporal(normalize_mysql_time, row, "checkOut"),
        status=_enum(AttendanceStatus, get_field(row, "status"), AttendanceStatus.PRESENT),
        device_source=get_text(row, "deviceSource"),
        note=get_text(row, "note"),
    )
