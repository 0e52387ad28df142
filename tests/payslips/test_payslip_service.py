from __future__ import annotations

import pytest

from paystream.core.exceptions import ValidationError
from paystream.payslips.service import PayslipService


def test_build_omits_zero_optional_lines(employee_factory):
    emp = employee_factory(base_salary=150000, salary_advance=20000)

    payslip = PayslipService().build(emp, "november", 2024)

    assert payslip.month == "November"
    assert [line.label for line in payslip.earnings] == ["Basic Salary"]
    assert [(line.label, line.amount) for line in payslip.deductions] == [("Advance recovery", 20000)]
    assert payslip.pay.net_pay == 130000


def test_build_lists_every_component(employee_factory):
    emp = employee_factory(base_salary=100000, allowances=5000, gifts=2000, deductions=3000, salary_advance=1000)

    payslip = PayslipService().build(emp, "March", 2025)

    assert [line.label for line in payslip.earnings] == ["Basic Salary", "Allowances", "Bonuses"]
    assert [line.label for line in payslip.deductions] == ["Advance recovery", "Tax / Other"]


def test_build_rejects_unknown_month(employee_factory):
    with pytest.raises(ValidationError):
        PayslipService().build(employee_factory(), "Smarch", 2024)


def test_money_format():
    svc = PayslipService(currency_prefix="Rs.")

    assert svc.money(1234.5) == "Rs. 1,234.50"
    assert svc.money(-20000) == "-Rs. 20,000.00"


def test_render_text_contains_totals(employee_factory):
    svc = PayslipService()
    payslip = svc.build(employee_factory(base_salary=150000, salary_advance=20000, bank_account=""), "November", 2024)

    text = svc.render_text(payslip)
    lines = text.splitlines()

    assert "PERIOD November 2024" in lines[1]
    assert any(line.startswith("NET SALARY PAYABLE") and line.endswith("Rs. 130,000.00") for line in lines)
    assert any("Advance recovery" in line and line.endswith("-Rs. 20,000.00") for line in lines)
    assert any(line.startswith("Bank account") and line.endswith("-") for line in lines)
    assert all(len(line) == 60 for line in lines if line not in ("EARNINGS", "DEDUCTIONS", svc.SUBTITLE))
