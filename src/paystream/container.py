from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceImportService
from .common.datetime_utils import parse_clock
from .core.constants import DEFAULT_CURRENCY_PREFIX, DEFAULT_DEVICE_SOURCE, DEFAULT_LATE_CUTOFF
from .core.enums import PayrollStatus
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .ledger.mysql_ledger_repository import MySQLLedgerRepository
from .ledger.repository import LedgerRepository
from .ledger.service import LedgerService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService
from .payslips.service import PayslipService
from .reports.service import DashboardService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService
from .workspace.state import PayrollWorkspace


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    payroll_repo: PayrollRepository
    ledger_repo: LedgerRepository
    attendance_repo: AttendanceRepository
    settings_repo: SettingsRepository

    employee_service: EmployeeService
    payroll_service: PayrollService
    ledger_service: LedgerService
    attendance_service: AttendanceImportService
    settings_service: SettingsService
    payslip_service: PayslipService
    dashboard_service: DashboardService

    workspace: PayrollWorkspace


def assemble(
    *,
    employees_repo: EmployeeRepository,
    payroll_repo: PayrollRepository,
    ledger_repo: LedgerRepository,
    attendance_repo: AttendanceRepository,
    settings_repo: SettingsRepository,
    late_cutoff: time = DEFAULT_LATE_CUTOFF,
    device_source: str = DEFAULT_DEVICE_SOURCE,
    currency_prefix: str = DEFAULT_CURRENCY_PREFIX,
    commit_status: PayrollStatus = PayrollStatus.PROCESSED,
) -> Container:
    """Wire services and the workspace over any set of repositories."""
    calculator = StandardPayrollCalculator()

    employee_service = EmployeeService(employees_repo)
    payroll_service = PayrollService(payroll_repo, calculator=calculator, commit_status=commit_status)
    ledger_service = LedgerService(ledger_repo)
    attendance_service = AttendanceImportService(attendance_repo, late_cutoff=late_cutoff, device_source=device_source)
    settings_service = SettingsService(settings_repo)
    payslip_service = PayslipService(calculator=calculator, currency_prefix=currency_prefix)
    dashboard_service = DashboardService()

    workspace = PayrollWorkspace(
        employee_service=employee_service,
        payroll_service=payroll_service,
        ledger_service=ledger_service,
        attendance_service=attendance_service,
        settings_service=settings_service,
        payslip_service=payslip_service,
        dashboard_service=dashboard_service,
    )

    return Container(
        employees_repo=employees_repo,
        payroll_repo=payroll_repo,
        ledger_repo=ledger_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        employee_service=employee_service,
        payroll_service=payroll_service,
        ledger_service=ledger_service,
        attendance_service=attendance_service,
        settings_service=settings_service,
        payslip_service=payslip_service,
        dashboard_service=dashboard_service,
        workspace=workspace,
    )


def build_container(*, db_config: dict, settings: object | None = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        employees_repo=MySQLEmployeeRepository(conn),
        payroll_repo=MySQLPayrollRepository(conn),
        ledger_repo=MySQLLedgerRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        late_cutoff=parse_clock(str(getattr(settings, "ATTENDANCE_LATE_CUTOFF", "09:00:00"))),
        device_source=str(getattr(settings, "ATTENDANCE_DEVICE_SOURCE", DEFAULT_DEVICE_SOURCE)),
        currency_prefix=str(getattr(settings, "CURRENCY_PREFIX", DEFAULT_CURRENCY_PREFIX)),
        commit_status=PayrollStatus(str(getattr(settings, "PAYROLL_COMMIT_STATUS", PayrollStatus.PROCESSED.value))),
    )
