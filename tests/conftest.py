from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Any, Optional, Sequence

import pytest

from paystream.attendance.model import AttendanceEntry
from paystream.container import assemble
from paystream.core.enums import EmploymentStatus, LedgerKind, PayrollStatus
from paystream.core.exceptions import InconsistentWriteError, PayrollConflictError, PersistenceError
from paystream.employees.model import Employee
from paystream.ledger.model import LedgerTransaction
from paystream.payroll.model import PayrollRecord


class InMemoryEmployees:
    def __init__(self, employees: Sequence[Employee] = ()):
        self.rows: dict[str, Employee] = {e.id: e for e in employees}

    def list_all(self) -> list[Employee]:
        return list(self.rows.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self.rows.get(employee_id)

    def get_by_email(self, email: str) -> Optional[Employee]:
        return next((e for e in self.rows.values() if e.email.lower() == email.lower()), None)

    def create(self, employee: Employee) -> None:
        self.rows[employee.id] = employee

    def update(self, employee: Employee) -> bool:
        current = self.rows.get(employee.id)
        if current is None:
            return False
        self.rows[employee.id] = replace(employee, gifts=current.gifts, salary_advance=current.salary_advance)
        return True

    def delete_by_id(self, employee_id: str) -> bool:
        return self.rows.pop(employee_id, None) is not None

    def set_accumulator(self, employee_id: str, field: str, value: float) -> bool:
        current = self.rows.get(employee_id)
        if current is None:
            return False
        self.rows[employee_id] = replace(current, **{field: value})
        return True


class InMemoryPayroll:
    """Set ``enforce_unique=False`` to model a store without the period constraint."""

    def __init__(self, employees: InMemoryEmployees, records: Sequence[PayrollRecord] = (), *, enforce_unique: bool = True):
        self.employees = employees
        self.records: list[PayrollRecord] = list(records)
        self.enforce_unique = enforce_unique
        self.fail_with: Optional[Exception] = None
        self.commit_calls = 0

    def list_all(self) -> list[PayrollRecord]:
        return sorted(self.records, key=lambda r: r.processed_date, reverse=True)

    def commit_run(self, records: Sequence[PayrollRecord]) -> None:
        self.commit_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        if self.enforce_unique:
            for r in records:
                if any(x.employee_id == r.employee_id and x.matches_period(r.month, r.year) for x in self.records):
                    raise PayrollConflictError(f"Payroll for {r.month} {r.year} already exists for {r.employee_id}")
        self.records.extend(records)
        for r in records:
            self.employees.set_accumulator(r.employee_id, "gifts", 0.0)
            self.employees.set_accumulator(r.employee_id, "salary_advance", 0.0)


class InMemoryLedger:
    def __init__(self, employees: InMemoryEmployees):
        self.employees = employees
        self.rows: dict[LedgerKind, list[LedgerTransaction]] = {LedgerKind.ADVANCE: [], LedgerKind.BONUS: []}
        self.fail_with: Optional[Exception] = None

    def list_all(self, kind: LedgerKind) -> list[LedgerTransaction]:
        return sorted(self.rows[kind], key=lambda t: t.date, reverse=True)

    def record_grant(self, transaction: LedgerTransaction, *, new_total: float) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        field = "salary_advance" if transaction.kind == LedgerKind.ADVANCE else "gifts"
        if transaction.employee_id not in self.employees.rows:
            raise InconsistentWriteError(f"Employee {transaction.employee_id} vanished during the grant")
        self.rows[transaction.kind].append(transaction)
        self.employees.set_accumulator(transaction.employee_id, field, new_total)


class InMemoryAttendance:
    def __init__(self):
        self.rows: list[AttendanceEntry] = []

    def list_all(self) -> list[AttendanceEntry]:
        return list(self.rows)

    def insert_many(self, entries: Sequence[AttendanceEntry]) -> None:
        self.rows.extend(entries)


class InMemorySettings:
    def __init__(self, values: Optional[dict[str, Any]] = None):
        self.values: dict[str, Any] = dict(values or {})
        self.fail_with: Optional[Exception] = None

    def get(self, key: str) -> Optional[Any]:
        return self.values.get(key)

    def upsert(self, key: str, value: Any) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.values[key] = value


def make_employee(employee_id: str = "EMP001", **overrides) -> Employee:
    values = dict(
        id=employee_id,
        first_name="Aarav",
        last_name="Sharma",
        email=f"{employee_id.lower()}@paystream.test",
        department="Engineering",
        position="Developer",
        base_salary=150000.0,
        allowances=0.0,
        deductions=0.0,
        gifts=0.0,
        salary_advance=0.0,
        status=EmploymentStatus.ACTIVE,
        joining_date=date(2023, 1, 15),
        bank_account="HDFC-0001",
    )
    values.update(overrides)
    return Employee(**values)


def make_record(employee_id: str, month: str = "November", year: int = 2024, net_pay: float = 100000.0, **overrides) -> PayrollRecord:
    values = dict(
        id=f"PAY-{employee_id}-{month}-{year}",
        employee_id=employee_id,
        month=month,
        year=year,
        gross_pay=net_pay,
        net_pay=net_pay,
        status=PayrollStatus.PAID,
        processed_date=datetime(2024, 12, 1, 10, 0),
    )
    values.update(overrides)
    return PayrollRecord(**values)


@pytest.fixture
def employee_factory():
    return make_employee


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def store():
    """Fresh in-memory store: employees plus every history table."""

    class Store:
        def __init__(self):
            self.employees = InMemoryEmployees()
            self.payroll = InMemoryPayroll(self.employees)
            self.ledger = InMemoryLedger(self.employees)
            self.attendance = InMemoryAttendance()
            self.settings = InMemorySettings()

    return Store()


@pytest.fixture
def container(store):
    return assemble(
        employees_repo=store.employees,
        payroll_repo=store.payroll,
        ledger_repo=store.ledger,
        attendance_repo=store.attendance,
        settings_repo=store.settings,
    )


@pytest.fixture
def workspace(container):
    return container.workspace


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from paystream.main import create_app

    app = create_app(container)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def unreachable():
    return PersistenceError("Could not connect to the database")
