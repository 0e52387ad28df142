from __future__ import annotations

from typing import Sequence

from mysql.connector import errorcode

from ..core.exceptions import ConflictError, PayrollConflictError
from ..database.connection import DatabaseConnection
from ..database.mapping import payroll_record_from_row
from ..database.mysql_base import db_cursor, fetchall
from .model import PayrollRecord
from .repository import PayrollRepository


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, month, year, gross_pay, net_pay, status, processed_date
                FROM payroll
                ORDER BY processed_date DESC, id
                """
            )
            return [payroll_record_from_row(r) for r in fetchall(cur)]

    def commit_run(self, records: Sequence[PayrollRecord]) -> None:
        if not records:
            return

        employee_ids = sorted({r.employee_id for r in records})
        placeholders = ",".join(["%s"] * len(employee_ids))
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.executemany(
                    """
                    INSERT INTO payroll(id, employee_id, month, year, gross_pay, net_pay, status, processed_date)
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    [
                        (
                            r.id,
                            r.employee_id,
                            r.month,
                            int(r.year),
                            r.gross_pay,
                            r.net_pay,
                            r.status.value,
                            r.processed_date,
                        )
                        for r in records
                    ],
                )
                cur.execute(
                    f"UPDATE employees SET gifts=0, salary_advance=0 WHERE id IN ({placeholders})",
                    tuple(employee_ids),
                )
        except ConflictError as exc:
            if exc.errno != errorcode.ER_DUP_ENTRY:
                raise
            raise PayrollConflictError(
                "Payroll already recorded for at least one employee in this period"
            ) from exc
