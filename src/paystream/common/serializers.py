"""JSON shapes for the HTTP API (camelCase, as the web client expects)."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional

from ..attendance.model import AttendanceEntry
from ..employees.model import Employee
from ..ledger.model import LedgerTransaction
from ..payroll.calculator.base import PayBreakdown
from ..payroll.model import PayrollPreview, PayrollRecord
from ..payslips.service import Payslip
from ..reports.service import DashboardSummary


def _iso(value: Optional[date | datetime | time]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def employee_to_dict(e: Employee) -> dict[str, Any]:
    return {
        "id": e.id,
        "firstName": e.first_name,
        "lastName": e.last_name,
        "email": e.email,
        "department": e.department,
        "position": e.position,
        "baseSalary": e.base_salary,
        "allowances": e.allowances,
        "gifts": e.gifts,
        "deductions": e.deductions,
        "salaryAdvance": e.salary_advance,
        "status": e.status.value,
        "joiningDate": _iso(e.joining_date),
        "bankAccount": e.bank_account,
    }


def payroll_record_to_dict(r: PayrollRecord) -> dict[str, Any]:
    return {
        "id": r.id,
        "employeeId": r.employee_id,
        "month": r.month,
        "year": r.year,
        "grossPay": r.gross_pay,
        "netPay": r.net_pay,
        "status": r.status.value,
        "processedDate": _iso(r.processed_date),
    }


def preview_to_dict(p: PayrollPreview) -> dict[str, Any]:
    return {
        "month": p.month,
        "year": p.year,
        "processed": [payroll_record_to_dict(r) for r in p.processed],
        "drafts": [payroll_record_to_dict(r) for r in p.drafts],
        "totalNet": p.total_net,
    }


def ledger_transaction_to_dict(t: LedgerTransaction) -> dict[str, Any]:
    return {
        "id": t.id,
        "employeeId": t.employee_id,
        "employeeName": t.employee_name,
        "amount": t.amount,
        "date": _iso(t.date),
        "reason": t.reason,
    }


def attendance_entry_to_dict(a: AttendanceEntry) -> dict[str, Any]:
    return {
        "id": a.id,
        "employeeId": a.employee_id,
        "employeeName": a.employee_name,
        "date": _iso(a.date),
        "checkIn": _iso(a.check_in),
        "checkOut": _iso(a.check_out),
        "status": a.status.value,
        "deviceSource": a.device_source,
        "note": a.note,
    }


def breakdown_to_dict(b: PayBreakdown) -> dict[str, Any]:
    return {
        "baseSalary": b.base_salary,
        "allowances": b.allowances,
        "gifts": b.gifts,
        "deductions": b.deductions,
        "salaryAdvance": b.salary_advance,
        "grossPay": b.gross_pay,
        "totalDeductions": b.total_deductions,
        "netPay": b.net_pay,
    }


def payslip_to_dict(p: Payslip) -> dict[str, Any]:
    return {
        "employeeId": p.employee_id,
        "employeeName": p.employee_name,
        "position": p.position,
        "department": p.department,
        "bankAccount": p.bank_account,
        "month": p.month,
        "year": p.year,
        "earnings": [{"label": line.label, "amount": line.amount} for line in p.earnings],
        "deductions": [{"label": line.label, "amount": line.amount} for line in p.deductions],
        "pay": breakdown_to_dict(p.pay),
    }


def dashboard_to_dict(s: DashboardSummary) -> dict[str, Any]:
    return {
        "totalEmployees": s.total_employees,
        "activeEmployees": s.active_employees,
        "totalPayout": s.total_payout,
        "averageSalary": s.average_salary,
        "outstandingGifts": s.outstanding_gifts,
        "outstandingAdvances": s.outstanding_advances,
        "costByDepartment": [{"name": d.name, "cost": d.cost} for d in s.cost_by_department],
    }
