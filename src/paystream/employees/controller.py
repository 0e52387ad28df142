from __future__ import annotations

from datetime import date
from typing import Any, Optional

from flask import Flask, Response, request

from ..common.datetime_utils import parse_iso_date
from ..common.fields import get_field, get_number, get_text
from ..common.http import json_body, ok
from ..common.serializers import employee_to_dict, payslip_to_dict
from ..core.enums import EmploymentStatus, enum_by_value
from ..core.exceptions import ValidationError
from ..container import Container
from .model import EmployeeInput


def _status(value: Any) -> EmploymentStatus:
    if not value:
        return EmploymentStatus.ACTIVE
    status = enum_by_value(EmploymentStatus, value)
    if status is None:
        raise ValidationError(f"Unknown employment status: {value!r}")
    return status


def _joining_date(value: Any) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(str(value)[:10])
    except ValueError:
        raise ValidationError(f"Joining date must be YYYY-MM-DD, got {value!r}")


def employee_input_from_payload(body: dict) -> EmployeeInput:
    """Accepts camelCase or snake_case keys, like the store rows do."""
    return EmployeeInput(
        first_name=get_text(body, "firstName"),
        last_name=get_text(body, "lastName"),
        email=get_text(body, "email"),
        department=get_text(body, "department"),
        position=get_text(body, "position"),
        base_salary=get_number(body, "baseSalary"),
        allowances=get_number(body, "allowances"),
        deductions=get_number(body, "deductions"),
        status=_status(get_field(body, "status")),
        joining_date=_joining_date(get_field(body, "joiningDate")),
        bank_account=get_text(body, "bankAccount"),
    )


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        term = request.args.get("q", "")
        employees = workspace.search_employees(term) if term else workspace.employees
        return ok([employee_to_dict(e) for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    def employees_create():
        employee = workspace.save_employee(employee_input_from_payload(json_body()))
        return ok(employee_to_dict(employee), status=201)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_get")
    def employees_get(employee_id: str):
        return ok(employee_to_dict(workspace.get_employee(employee_id)))

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="employees_update")
    def employees_update(employee_id: str):
        employee = workspace.save_employee(employee_input_from_payload(json_body()), employee_id)
        return ok(employee_to_dict(employee))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    def employees_delete(employee_id: str):
        workspace.delete_employee(employee_id)
        return ok({"id": employee_id})

    @app.route("/api/employees/<employee_id>/payslip", methods=["GET"], endpoint="employees_payslip")
    def employees_payslip(employee_id: str):
        payslip = workspace.payslip(
            employee_id,
            request.args.get("month") or None,
            request.args.get("year") or None,
        )
        if request.args.get("format") == "text":
            return Response(workspace.render_payslip(payslip), mimetype="text/plain")
        return ok(payslip_to_dict(payslip))
