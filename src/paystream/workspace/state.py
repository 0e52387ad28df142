from __future__ import annotations

import logging
import threading
from typing import Any, Optional, Sequence

from ..attendance.model import AttendanceEntry
from ..attendance.service import AttendanceImportService
from ..core.constants import SETTINGS_KEY_DEPARTMENTS, SETTINGS_KEY_POSITIONS
from ..core.enums import LedgerKind
from ..core.exceptions import NotFoundError
from ..employees.model import Employee, EmployeeInput
from ..employees.service import EmployeeService
from ..ledger.model import LedgerTransaction
from ..ledger.service import GrantResult, LedgerService
from ..payroll.model import PayrollPreview, PayrollRecord
from ..payroll.service import PayrollService
from ..payslips.service import Payslip, PayslipService
from ..reports.service import DashboardService, DashboardSummary
from ..settings.service import SettingsService

log = logging.getLogger(__name__)


class PayrollWorkspace:
    """In-memory source of truth for one running application.

    Holds the roster and every history collection, loaded in bulk from the
    store. Screens read through the accessors and change state only through
    the intent methods; each intent writes to the store first and touches
    memory only once the write succeeded, so a failed operation leaves the
    workspace exactly as it was.
    """

    def __init__(
        self,
        *,
        employee_service: EmployeeService,
        payroll_service: PayrollService,
        ledger_service: LedgerService,
        attendance_service: AttendanceImportService,
        settings_service: SettingsService,
        payslip_service: PayslipService,
        dashboard_service: Optional[DashboardService] = None,
    ):
        self._employee_service = employee_service
        self._payroll_service = payroll_service
        self._ledger_service = ledger_service
        self._attendance_service = attendance_service
        self._settings_service = settings_service
        self._payslip_service = payslip_service
        self._dashboard_service = dashboard_service or DashboardService()

        self._lock = threading.RLock()
        self._loaded = False
        self._employees: list[Employee] = []
        self._payroll_history: list[PayrollRecord] = []
        self._advances: list[LedgerTransaction] = []
        self._bonuses: list[LedgerTransaction] = []
        self._attendance: list[AttendanceEntry] = []
        self._departments: tuple[str, ...] = ()
        self._positions: tuple[str, ...] = ()

    # -- loading ---------------------------------------------------------

    def load(self) -> None:
        """Fetch every collection; on failure the previous state is kept."""
        with self._lock:
            employees = list(self._employee_service.list_employees())
            history = list(self._payroll_service.history())
            advances = list(self._ledger_service.history(LedgerKind.ADVANCE))
            bonuses = list(self._ledger_service.history(LedgerKind.BONUS))
            attendance = list(self._attendance_service.list_entries())
            vocabulary = self._settings_service.load()

            self._employees = employees
            self._payroll_history = history
            self._advances = advances
            self._bonuses = bonuses
            self._attendance = attendance
            self._departments = vocabulary.departments
            self._positions = vocabulary.positions
            self._loaded = True
            log.info(
                "Workspace loaded: %d employees, %d payroll records, %d advances, %d bonuses, %d attendance entries",
                len(employees),
                len(history),
                len(advances),
                len(bonuses),
                len(attendance),
            )

    def ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    # -- read accessors --------------------------------------------------

    @property
    def employees(self) -> tuple[Employee, ...]:
        return tuple(self._employees)

    @property
    def payroll_history(self) -> tuple[PayrollRecord, ...]:
        return tuple(self._payroll_history)

    @property
    def advance_history(self) -> tuple[LedgerTransaction, ...]:
        return tuple(self._advances)

    @property
    def bonus_history(self) -> tuple[LedgerTransaction, ...]:
        return tuple(self._bonuses)

    @property
    def attendance(self) -> tuple[AttendanceEntry, ...]:
        return tuple(self._attendance)

    @property
    def departments(self) -> tuple[str, ...]:
        return self._departments

    @property
    def positions(self) -> tuple[str, ...]:
        return self._positions

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self._employees if e.id == employee_id), None)

    def get_employee(self, employee_id: str) -> Employee:
        employee = self.find_employee(employee_id)
        if employee is None:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def search_employees(self, term: str) -> list[Employee]:
        return self._employee_service.search(self._employees, term)

    # -- employees -------------------------------------------------------

    def save_employee(self, data: EmployeeInput, employee_id: Optional[str] = None) -> Employee:
        with self._lock:
            if employee_id:
                saved = self._employee_service.update_employee(employee_id, data)
                self._replace_employee(saved)
            else:
                saved = self._employee_service.create_employee(data)
                self._employees.append(saved)
            return saved

    def delete_employee(self, employee_id: str) -> None:
        with self._lock:
            self._employee_service.delete_employee(employee_id)
            # Mirror the store's cascade.
            self._employees = [e for e in self._employees if e.id != employee_id]
            self._payroll_history = [r for r in self._payroll_history if r.employee_id != employee_id]
            self._advances = [t for t in self._advances if t.employee_id != employee_id]
            self._bonuses = [t for t in self._bonuses if t.employee_id != employee_id]
            self._attendance = [a for a in self._attendance if a.employee_id != employee_id]

    def _replace_employee(self, employee: Employee) -> None:
        self._employees = [employee if e.id == employee.id else e for e in self._employees]

    # -- advances / bonuses ----------------------------------------------

    def _issue(self, kind: LedgerKind, employee_id: Optional[str], amount: Any, reason: str) -> Optional[GrantResult]:
        if not employee_id or not str(employee_id).strip():
            return None
        with self._lock:
            employee = self.get_employee(employee_id)
            result = self._ledger_service.issue(kind, employee, amount, reason)
            if result is None:
                return None
            self._replace_employee(result.employee)
            if kind == LedgerKind.ADVANCE:
                self._advances.insert(0, result.transaction)
            else:
                self._bonuses.insert(0, result.transaction)
            return result

    def issue_advance(self, employee_id: Optional[str], amount: Any, reason: str = "") -> Optional[GrantResult]:
        return self._issue(LedgerKind.ADVANCE, employee_id, amount, reason)

    def issue_bonus(self, employee_id: Optional[str], amount: Any, reason: str = "") -> Optional[GrantResult]:
        return self._issue(LedgerKind.BONUS, employee_id, amount, reason)

    # -- payroll ---------------------------------------------------------

    def preview_payroll(self, month: str, year: Any, search_term: str = "") -> PayrollPreview:
        return self._payroll_service.preview(
            self._employees,
            self._payroll_history,
            month,
            year,
            search_term=search_term,
        )

    def commit_payroll(self, drafts: Sequence[PayrollRecord]) -> tuple[PayrollRecord, ...]:
        with self._lock:
            records = self._payroll_service.commit_run(drafts)
            if not records:
                return records

            paid_ids = {r.employee_id for r in records}
            self._payroll_history = [*records, *self._payroll_history]
            self._employees = [
                e.with_accumulators(gifts=0.0, salary_advance=0.0) if e.id in paid_ids else e
                for e in self._employees
            ]
            return records

    # -- attendance ------------------------------------------------------

    def import_attendance(self, text: str) -> list[AttendanceEntry]:
        with self._lock:
            entries = self._attendance_service.import_log(text, self._employees)
            self._attendance = [*entries, *self._attendance]
            return entries

    # -- settings --------------------------------------------------------

    def add_department(self, name: str) -> tuple[str, ...]:
        with self._lock:
            self._departments = self._settings_service.add_value(SETTINGS_KEY_DEPARTMENTS, self._departments, name)
            return self._departments

    def remove_department(self, name: str) -> tuple[str, ...]:
        with self._lock:
            self._departments = self._settings_service.remove_value(SETTINGS_KEY_DEPARTMENTS, self._departments, name)
            return self._departments

    def add_position(self, name: str) -> tuple[str, ...]:
        with self._lock:
            self._positions = self._settings_service.add_value(SETTINGS_KEY_POSITIONS, self._positions, name)
            return self._positions

    def remove_position(self, name: str) -> tuple[str, ...]:
        with self._lock:
            self._positions = self._settings_service.remove_value(SETTINGS_KEY_POSITIONS, self._positions, name)
            return self._positions

    # -- derived views ---------------------------------------------------

    def dashboard(self) -> DashboardSummary:
        return self._dashboard_service.summary(self._employees, self._payroll_history)

    def payslip(self, employee_id: str, month: Optional[str] = None, year: Optional[int] = None) -> Payslip:
        return self._payslip_service.build(self.get_employee(employee_id), month, year)

    def render_payslip(self, payslip: Payslip) -> str:
        return self._payslip_service.render_text(payslip)
