from __future__ import annotations

from typing import Sequence

from ..core.enums import LedgerKind
from ..core.exceptions import InconsistentWriteError
from ..database.connection import DatabaseConnection
from ..database.mapping import ledger_transaction_from_row
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LedgerTransaction
from .repository import LedgerRepository

# kind -> (ledger table, employee accumulator column)
_TARGETS = {
    LedgerKind.ADVANCE: ("advances", "salary_advance"),
    LedgerKind.BONUS: ("bonuses", "gifts"),
}


class MySQLLedgerRepository(LedgerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, kind: LedgerKind) -> Sequence[LedgerTransaction]:
        table, _ = _TARGETS[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, employee_id, employee_name, amount, date, reason
                FROM {table}
                ORDER BY date DESC, id
                """
            )
            return [ledger_transaction_from_row(r, kind) for r in fetchall(cur)]

    def record_grant(self, transaction: LedgerTransaction, *, new_total: float) -> None:
        table, column = _TARGETS[transaction.kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {table}(id, employee_id, employee_name, amount, date, reason)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    transaction.id,
                    transaction.employee_id,
                    transaction.employee_name,
                    transaction.amount,
                    transaction.date,
                    transaction.reason,
                ),
            )
            cur.execute(f"UPDATE employees SET {column}=%s WHERE id=%s", (new_total, transaction.employee_id))
            # MySQL reports 0 affected rows when the stored total already equals new_total.
            if cur.rowcount > 0:
                return
            cur.execute("SELECT 1 AS found FROM employees WHERE id=%s", (transaction.employee_id,))
            if fetchone(cur) is None:
                # Raising inside the block rolls the ledger insert back too.
                raise InconsistentWriteError(
                    f"Accumulator update did not apply for employee {transaction.employee_id}"
                )
