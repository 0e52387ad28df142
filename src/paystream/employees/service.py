from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Sequence

from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.enums import EmploymentStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, EmployeeInput
from .repository import EmployeeRepository

log = logging.getLogger(__name__)


class EmployeeService:
    """Use case: maintain the roster (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def _validated(self, data: EmployeeInput) -> EmployeeInput:
        email = require_non_empty(data.email, "Email").lower()
        if "@" not in email:
            raise ValidationError("Email is not valid")

        for label, value in (
            ("Base salary", data.base_salary),
            ("Allowances", data.allowances),
            ("Deductions", data.deductions),
        ):
            if value < 0:
                raise ValidationError(f"{label} cannot be negative")

        return replace(
            data,
            first_name=require_non_empty(data.first_name, "First name"),
            last_name=require_non_empty(data.last_name, "Last name"),
            email=email,
            department=(data.department or "").strip(),
            position=(data.position or "").strip(),
            bank_account=(data.bank_account or "").strip(),
        )

    def create_employee(self, data: EmployeeInput) -> Employee:
        data = self._validated(data)
        if self._employees.get_by_email(data.email):
            raise ValidationError("An employee with this email already exists")

        employee = Employee(
            id=new_id(),
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            department=data.department,
            position=data.position,
            base_salary=data.base_salary,
            allowances=data.allowances,
            deductions=data.deductions,
            gifts=0.0,
            salary_advance=0.0,
            status=EmploymentStatus.ACTIVE,
            joining_date=data.joining_date,
            bank_account=data.bank_account,
        )
        self._employees.create(employee)
        log.info("Created employee %s (%s)", employee.id, employee.email)
        return employee

    def update_employee(self, employee_id: str, data: EmployeeInput) -> Employee:
        current = self.get(employee_id)
        data = self._validated(data)

        other = self._employees.get_by_email(data.email)
        if other and other.id != current.id:
            raise ValidationError("An employee with this email already exists")

        # Accumulators only move through grants and payroll commits.
        updated = replace(
            current,
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            department=data.department,
            position=data.position,
            base_salary=data.base_salary,
            allowances=data.allowances,
            deductions=data.deductions,
            status=data.status,
            joining_date=data.joining_date,
            bank_account=data.bank_account,
        )
        if not self._employees.update(updated):
            raise NotFoundError(f"Employee {employee_id} does not exist")
        log.info("Updated employee %s", employee_id)
        return updated

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} does not exist")
        log.info("Deleted employee %s", employee_id)

    @staticmethod
    def search(employees: Iterable[Employee], term: str) -> list[Employee]:
        needle = (term or "").strip().lower()
        if not needle:
            return list(employees)
        return [
            e
            for e in employees
            if needle in e.full_name.lower() or needle in e.email.lower() or needle in e.position.lower()
        ]
