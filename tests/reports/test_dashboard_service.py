from __future__ import annotations

from paystream.core.enums import EmploymentStatus
from paystream.reports.service import DashboardService


def test_summary_figures(employee_factory, record_factory):
    employees = [
        employee_factory("EMP001", department="Engineering", base_salary=150000, salary_advance=20000),
        employee_factory("EMP002", department="Engineering", base_salary=50000, gifts=1000),
        employee_factory("EMP003", department="Sales", base_salary=40000, status=EmploymentStatus.ON_LEAVE),
    ]
    history = [record_factory("EMP001", net_pay=130000), record_factory("EMP002", "October", net_pay=50000)]

    summary = DashboardService().summary(employees, history)

    assert summary.total_employees == 3
    assert summary.active_employees == 2
    assert summary.total_payout == 180000
    assert summary.average_salary == 80000
    assert summary.outstanding_gifts == 1000
    assert summary.outstanding_advances == 20000
    assert {d.name: d.cost for d in summary.cost_by_department} == {"Engineering": 200000, "Sales": 40000}


def test_summary_of_empty_roster():
    summary = DashboardService().summary([], [])

    assert summary.total_employees == 0
    assert summary.average_salary == 0.0
    assert summary.cost_by_department == ()
