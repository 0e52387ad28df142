from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mapping import employee_from_row
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    id, first_name, last_name, email, department, position,
    base_salary, allowances, gifts, deductions, salary_advance,
    status, joining_date, bank_account
"""


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at, id")
            return [employee_from_row(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return employee_from_row(row) if row else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE email=%s", (email,))
            row = fetchone(cur)
            return employee_from_row(row) if row else None

    def create(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(
                    id, first_name, last_name, email, department, position,
                    base_salary, allowances, gifts, deductions, salary_advance,
                    status, joining_date, bank_account
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.id,
                    employee.first_name,
                    employee.last_name,
                    employee.email,
                    employee.department,
                    employee.position,
                    employee.base_salary,
                    employee.allowances,
                    employee.gifts,
                    employee.deductions,
                    employee.salary_advance,
                    employee.status.value,
                    employee.joining_date,
                    employee.bank_account,
                ),
            )

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET first_name=%s, last_name=%s, email=%s, department=%s, position=%s,
                    base_salary=%s, allowances=%s, deductions=%s,
                    status=%s, joining_date=%s, bank_account=%s
                WHERE id=%s
                """,
                (
                    employee.first_name,
                    employee.last_name,
                    employee.email,
                    employee.department,
                    employee.position,
                    employee.base_salary,
                    employee.allowances,
                    employee.deductions,
                    employee.status.value,
                    employee.joining_date,
                    employee.bank_account,
                    employee.id,
                ),
            )
            # MySQL reports 0 affected rows when nothing changed.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM employees WHERE id=%s", (employee.id,))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: str) -> bool:
        # Ledger, payroll and attendance rows go with it (ON DELETE CASCADE).
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
            return cur.rowcount > 0
