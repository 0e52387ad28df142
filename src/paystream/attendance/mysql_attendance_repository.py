from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mapping import attendance_entry_from_row
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceEntry
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, employee_name, date, check_in, check_out, status, device_source, note
                FROM attendance
                ORDER BY date DESC, check_in DESC
                """
            )
            return [attendance_entry_from_row(r) for r in fetchall(cur)]

    def insert_many(self, entries: Sequence[AttendanceEntry]) -> None:
        if not entries:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance(id, employee_id, employee_name, date, check_in, check_out, status, device_source, note)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                [
                    (
                        e.id,
                        e.employee_id,
                        e.employee_name,
                        e.date,
                        e.check_in,
                        e.check_out,
                        e.status.value,
                        e.device_source,
                        e.note,
                    )
                    for e in entries
                ],
            )
