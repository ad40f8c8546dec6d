from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .checkins.mysql_checkin_repository import MySQLCheckInRepository
from .checkins.repository import CheckInRepository
from .checkins.service import CheckInService
from .company.mysql_company_repository import MySQLCompanyRepository
from .company.repository import CompanyRepository
from .company.service import CompanyService
from .core import constants
from .core.enums import LedgerKind
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .ledgers.mysql_ledger_repository import MySQLLedgerRepository
from .ledgers.repository import LedgerRepository
from .ledgers.service import AdvanceService, DayAdjustmentService, LeaveService, OvertimeService
from .payroll.service import EmployeeSummaryService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AccountService, AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    advances_repo: LedgerRepository
    bonuses_repo: LedgerRepository
    discounts_repo: LedgerRepository
    overtime_repo: LedgerRepository
    leaves_repo: LedgerRepository
    company_repo: CompanyRepository
    users_repo: UserRepository
    checkins_repo: CheckInRepository

    auth_service: AuthService
    account_service: AccountService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    advance_service: AdvanceService
    bonus_service: DayAdjustmentService
    discount_service: DayAdjustmentService
    overtime_service: OvertimeService
    leave_service: LeaveService
    summary_service: EmployeeSummaryService
    company_service: CompanyService
    checkin_service: CheckInService

    def ledger_service(self, kind: LedgerKind):
        return {
            LedgerKind.ADVANCES: self.advance_service,
            LedgerKind.BONUSES: self.bonus_service,
            LedgerKind.DISCOUNTS: self.discount_service,
            LedgerKind.OVERTIME: self.overtime_service,
            LedgerKind.LEAVES: self.leave_service,
        }[kind]


def assemble(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    advances_repo: LedgerRepository,
    bonuses_repo: LedgerRepository,
    discounts_repo: LedgerRepository,
    overtime_repo: LedgerRepository,
    leaves_repo: LedgerRepository,
    company_repo: CompanyRepository,
    users_repo: UserRepository,
    checkins_repo: CheckInRepository,
    settings: Any = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any repository implementations."""

    def opt(name: str):
        return getattr(settings, name, getattr(constants, name))

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        bonuses_repo=bonuses_repo,
        discounts_repo=discounts_repo,
        overtime_repo=overtime_repo,
        leaves_repo=leaves_repo,
        company_repo=company_repo,
        users_repo=users_repo,
        checkins_repo=checkins_repo,
        auth_service=AuthService(users_repo),
        account_service=AccountService(users_repo),
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo),
        advance_service=AdvanceService(advances_repo),
        bonus_service=DayAdjustmentService(bonuses_repo, kind=LedgerKind.BONUSES),
        discount_service=DayAdjustmentService(discounts_repo, kind=LedgerKind.DISCOUNTS),
        overtime_service=OvertimeService(overtime_repo),
        leave_service=LeaveService(leaves_repo),
        summary_service=EmployeeSummaryService(
            employees_repo,
            attendance_repo,
            advances_repo,
            bonuses_repo,
            discounts_repo,
            overtime_repo,
            leaves_repo,
            max_workers=opt("SUMMARY_MAX_WORKERS"),
        ),
        company_service=CompanyService(
            company_repo,
            default_place_name=opt("DEFAULT_PLACE_NAME"),
            default_manager_name=opt("DEFAULT_MANAGER_NAME"),
        ),
        checkin_service=CheckInService(checkins_repo, users_repo, recent_limit=opt("RECENT_CHECKINS_LIMIT")),
    )


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        conn=conn,
        settings=settings,
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        advances_repo=MySQLLedgerRepository.for_kind(conn, LedgerKind.ADVANCES),
        bonuses_repo=MySQLLedgerRepository.for_kind(conn, LedgerKind.BONUSES),
        discounts_repo=MySQLLedgerRepository.for_kind(conn, LedgerKind.DISCOUNTS),
        overtime_repo=MySQLLedgerRepository.for_kind(conn, LedgerKind.OVERTIME),
        leaves_repo=MySQLLedgerRepository.for_kind(conn, LedgerKind.LEAVES),
        company_repo=MySQLCompanyRepository(conn),
        users_repo=MySQLUserRepository(conn),
        checkins_repo=MySQLCheckInRepository(conn),
    )
