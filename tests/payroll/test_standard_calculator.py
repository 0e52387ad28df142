import math

from paystream.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_standard_calculator_gross_and_net(employee_factory):
    employee = employee_factory(
        base_salary=100000, allowances=5000, gifts=2500, deductions=7000, salary_advance=10000
    )

    pay = StandardPayrollCalculator().breakdown(employee)

    assert pay.gross_pay == 107500
    assert pay.total_deductions == 17000
    assert pay.net_pay == 90500


def test_standard_calculator_allows_negative_net(employee_factory):
    employee = employee_factory(base_salary=10000, salary_advance=25000)

    assert StandardPayrollCalculator().breakdown(employee).net_pay == -15000


def test_standard_calculator_treats_garbage_components_as_zero(employee_factory):
    employee = employee_factory(base_salary="50000", allowances=None, gifts="n/a", deductions=float("nan"))

    pay = StandardPayrollCalculator().breakdown(employee)

    assert pay.gross_pay == 50000
    assert pay.net_pay == 50000
    assert not math.isnan(pay.net_pay)
