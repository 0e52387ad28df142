from __future__ import annotations

from datetime import datetime

import pytest

from paystream.core.enums import LedgerKind
from paystream.core.exceptions import InconsistentWriteError, PersistenceError, ValidationError
from paystream.ledger.service import LedgerService

NOW = datetime(2024, 11, 20, 14, 0)


def test_issue_advance_appends_and_raises_accumulator(store, employee_factory):
    emp = employee_factory("EMP001", salary_advance=5000)
    store.employees.create(emp)

    result = LedgerService(store.ledger).issue_advance(emp, "20000", " rent ", now=NOW)

    assert result.transaction.amount == 20000
    assert result.transaction.kind == LedgerKind.ADVANCE
    assert result.transaction.employee_name == "Aarav Sharma"
    assert result.transaction.reason == "rent"
    assert result.transaction.date == NOW
    assert result.employee.salary_advance == 25000
    assert store.employees.get_by_id("EMP001").salary_advance == 25000
    assert store.ledger.rows[LedgerKind.ADVANCE] == [result.transaction]


def test_issue_bonus_touches_gifts_only(store, employee_factory):
    emp = employee_factory("EMP001", gifts=1000, salary_advance=300)
    store.employees.create(emp)

    result = LedgerService(store.ledger).issue_bonus(emp, 2500, now=NOW)

    assert (result.employee.gifts, result.employee.salary_advance) == (3500, 300)
    assert store.ledger.rows[LedgerKind.ADVANCE] == []


def test_issue_without_employee_is_a_no_op(store):
    assert LedgerService(store.ledger).issue(LedgerKind.BONUS, None, 100) is None
    assert store.ledger.rows[LedgerKind.BONUS] == []


@pytest.mark.parametrize("amount", [0, -10, "", "abc", None])
def test_issue_rejects_non_positive_amounts(store, employee_factory, amount):
    emp = employee_factory("EMP001")
    store.employees.create(emp)

    with pytest.raises(ValidationError):
        LedgerService(store.ledger).issue_advance(emp, amount)
    assert store.ledger.rows[LedgerKind.ADVANCE] == []


def test_issue_for_vanished_employee_raises_inconsistent_write(store, employee_factory):
    ghost = employee_factory("EMP404")

    with pytest.raises(InconsistentWriteError):
        LedgerService(store.ledger).issue_bonus(ghost, 100)
    assert store.ledger.rows[LedgerKind.BONUS] == []


def test_issue_store_failure_propagates(store, employee_factory, unreachable):
    emp = employee_factory("EMP001")
    store.employees.create(emp)
    store.ledger.fail_with = unreachable

    with pytest.raises(PersistenceError):
        LedgerService(store.ledger).issue_advance(emp, 100)
    assert store.employees.get_by_id("EMP001").salary_advance == 0
