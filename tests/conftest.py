from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from types import SimpleNamespace
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from config import testing as test_settings
from src.payroll_ledger.payroll_ledger.attendance.model import AttendanceRecord, AttendanceRow
from src.payroll_ledger.payroll_ledger.checkins.model import AttendanceLog
from src.payroll_ledger.payroll_ledger.company.model import CompanyInfo
from src.payroll_ledger.payroll_ledger.company.repository import MONTHLY_TABLES
from src.payroll_ledger.payroll_ledger.container import assemble
from src.payroll_ledger.payroll_ledger.core.context import Actor
from src.payroll_ledger.payroll_ledger.core.enums import LedgerKind, Role
from src.payroll_ledger.payroll_ledger.core.exceptions import ConflictError, NotFoundError
from src.payroll_ledger.payroll_ledger.employees.model import Employee
from src.payroll_ledger.payroll_ledger.ledgers.model import LedgerRow
from src.payroll_ledger.payroll_ledger.main import create_app
from src.payroll_ledger.payroll_ledger.users.model import EmployeeAccount, UserProfile


class InMemoryEmployees:
    """Employees plus the cascade the schema applies to dependent ledgers."""

    def __init__(self):
        self.rows: dict[int, Employee] = {}
        self.dependents: list = []
        self._id = 0

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.rows.get(employee_id)

    def get_by_number(self, employee_number: str) -> Optional[Employee]:
        return next((e for e in self.rows.values() if e.employee_number == employee_number), None)

    def create(self, *, employee_number: str, name: str) -> int:
        if self.get_by_number(employee_number):
            raise ConflictError("Duplicate entry")
        self._id += 1
        self.rows[self._id] = Employee(employee_id=self._id, employee_number=employee_number, name=name)
        return self._id

    def rename(self, *, employee_id: int, name: str) -> bool:
        if employee_id not in self.rows:
            return False
        self.rows[employee_id] = replace(self.rows[employee_id], name=name)
        return True

    def delete(self, *, employee_id: int) -> bool:
        if self.rows.pop(employee_id, None) is None:
            return False
        for repo in self.dependents:
            repo.drop_employee(employee_id)
        return True

    def list_all(self, *, search: Optional[str] = None):
        items = sorted(self.rows.values(), key=lambda e: e.employee_number)
        if search:
            term = search.lower()
            items = [e for e in items if term in e.name.lower() or term in e.employee_number.lower()]
        return items


class InMemoryAttendance:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.by_key: dict = {}
        self._id = 0

    def replace_status(self, key, status) -> int:
        if not self._employees.get_by_id(key.employee_id):
            raise NotFoundError("Referenced row does not exist")
        existing = self.by_key.get(key)
        record_id = existing.record_id if existing else self._id + 1
        self._id = max(self._id, record_id)
        self.by_key[key] = AttendanceRecord(
            record_id=record_id, employee_id=key.employee_id, work_date=key.work_date, status=status
        )
        return record_id

    def get(self, key):
        return self.by_key.get(key)

    def list_for_employee(self, employee_id: int):
        emp = self._employees.get_by_id(employee_id)
        rows = [
            AttendanceRow(
                record_id=r.record_id,
                employee_id=r.employee_id,
                employee_number=emp.employee_number,
                employee_name=emp.name,
                work_date=r.work_date,
                status=r.status,
            )
            for r in self.by_key.values()
            if r.employee_id == employee_id
        ]
        return sorted(rows, key=lambda r: r.work_date, reverse=True)

    def delete(self, *, record_id: int) -> bool:
        for key, rec in list(self.by_key.items()):
            if rec.record_id == record_id:
                del self.by_key[key]
                return True
        return False

    def drop_employee(self, employee_id: int) -> None:
        self.by_key = {k: v for k, v in self.by_key.items() if v.employee_id != employee_id}

    def clear(self) -> int:
        count = len(self.by_key)
        self.by_key.clear()
        return count


class InMemoryLedger:
    def __init__(self, employees: InMemoryEmployees, *, order_by: str = "entry_date"):
        self._employees = employees
        self._order_by = order_by
        self.rows: dict = {}
        self._id = 0

    def create(self, entry) -> int:
        if not self._employees.get_by_id(entry.employee_id):
            raise NotFoundError("Referenced row does not exist")
        self._id += 1
        self.rows[self._id] = replace(entry, entry_id=self._id)
        return self._id

    def update(self, entry) -> bool:
        old = self.rows.get(entry.entry_id)
        if old is None:
            return False
        if not self._employees.get_by_id(entry.employee_id):
            raise NotFoundError("Referenced row does not exist")
        if hasattr(old, "entry_date"):
            entry = replace(entry, entry_date=old.entry_date)
        self.rows[entry.entry_id] = entry
        return True

    def delete(self, *, entry_id: int) -> bool:
        return self.rows.pop(entry_id, None) is not None

    def list_all(self):
        items = sorted(
            self.rows.values(), key=lambda e: (getattr(e, self._order_by), e.entry_id), reverse=True
        )
        out = []
        for e in items:
            emp = self._employees.get_by_id(e.employee_id)
            out.append(LedgerRow(entry=e, employee_number=emp.employee_number, employee_name=emp.name))
        return out

    def list_for_employee(self, employee_id: int):
        return [e for e in self.rows.values() if e.employee_id == employee_id]

    def drop_employee(self, employee_id: int) -> None:
        self.rows = {k: v for k, v in self.rows.items() if v.employee_id != employee_id}

    def clear(self) -> int:
        count = len(self.rows)
        self.rows.clear()
        return count


class InMemoryCompany:
    def __init__(self, monthly: dict):
        self.info: Optional[CompanyInfo] = None
        self._monthly = monthly

    def get(self):
        return self.info

    def save(self, *, place_name: str, manager_name: str) -> int:
        company_id = self.info.company_id if self.info else 1
        self.info = CompanyInfo(company_id=company_id, place_name=place_name, manager_name=manager_name)
        return company_id

    def reset_monthly_data(self) -> dict:
        return {table: self._monthly[table].clear() for table in MONTHLY_TABLES}


class InMemoryUsers:
    def __init__(self):
        self.profiles: dict[int, UserProfile] = {}
        self.accounts: dict[int, EmployeeAccount] = {}
        self.checkins = None
        self._id = 0

    def get_by_id(self, user_id: int):
        return self.profiles.get(user_id)

    def get_by_email(self, email: str):
        return next((p for p in self.profiles.values() if p.email == email), None)

    def find_admin(self):
        return next((p for p in self.profiles.values() if p.role == Role.ADMIN), None)

    def create_profile(self, *, email, password_hash, full_name, role, employee_number=None) -> int:
        if self.get_by_email(email):
            raise ConflictError("Duplicate entry")
        self._id += 1
        self.profiles[self._id] = UserProfile(
            user_id=self._id,
            email=email,
            password_hash=password_hash,
            full_name=full_name,
            role=role,
            employee_number=employee_number,
        )
        return self._id

    def create_employee_account(self, *, email, password_hash, full_name, employee_number, created_by) -> int:
        user_id = self.create_profile(
            email=email,
            password_hash=password_hash,
            full_name=full_name,
            role=Role.EMPLOYEE,
            employee_number=employee_number,
        )
        self.accounts[user_id] = EmployeeAccount(
            account_id=user_id,
            user_id=user_id,
            employee_number=employee_number,
            full_name=full_name,
            email=email,
            is_active=True,
            created_by=created_by,
        )
        return user_id

    def set_active(self, user_id: int, *, is_active: bool) -> bool:
        if user_id not in self.profiles:
            return False
        self.profiles[user_id] = replace(self.profiles[user_id], is_active=is_active)
        if user_id in self.accounts:
            self.accounts[user_id] = replace(self.accounts[user_id], is_active=is_active)
        return True

    def update_password_hash(self, user_id: int, *, password_hash: str) -> bool:
        if user_id not in self.profiles:
            return False
        self.profiles[user_id] = replace(self.profiles[user_id], password_hash=password_hash)
        return True

    def delete_by_id(self, user_id: int) -> bool:
        self.accounts.pop(user_id, None)
        return self.profiles.pop(user_id, None) is not None

    def list_accounts(self):
        return sorted(self.accounts.values(), key=lambda a: a.account_id, reverse=True)


class InMemoryCheckIns:
    def __init__(self):
        self.logs: dict[int, AttendanceLog] = {}
        self._id = 0

    def get_for_user_and_date(self, user_id: int, log_date: date):
        return next((l for l in self.logs.values() if l.user_id == user_id and l.log_date == log_date), None)

    def create(self, *, user_id, employee_number, full_name, check_in_time, log_date, ip_address=None, user_agent=None):
        # Acts as the UNIQUE(user_id, log_date) key, independent of the lookup method.
        if any(l.user_id == user_id and l.log_date == log_date for l in self.logs.values()):
            raise ConflictError("Duplicate entry")
        self._id += 1
        self.logs[self._id] = AttendanceLog(
            log_id=self._id,
            user_id=user_id,
            employee_number=employee_number,
            full_name=full_name,
            check_in_time=check_in_time,
            log_date=log_date,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        return self._id

    def list_logs(self, *, start_date=None, end_date=None, user_id=None, limit=None):
        items = [
            l
            for l in self.logs.values()
            if (start_date is None or l.log_date >= start_date)
            and (end_date is None or l.log_date <= end_date)
            and (user_id is None or l.user_id == user_id)
        ]
        items.sort(key=lambda l: l.check_in_time, reverse=True)
        return items[:limit] if limit else items


def make_repos() -> SimpleNamespace:
    employees = InMemoryEmployees()
    attendance = InMemoryAttendance(employees)
    ledgers = {
        kind: InMemoryLedger(employees, order_by="start_date" if kind == LedgerKind.LEAVES else "entry_date")
        for kind in LedgerKind
    }
    employees.dependents = [attendance, *ledgers.values()]

    monthly = {"attendance": attendance, **{kind.value: repo for kind, repo in ledgers.items()}}
    return SimpleNamespace(
        employees=employees,
        attendance=attendance,
        advances=ledgers[LedgerKind.ADVANCES],
        bonuses=ledgers[LedgerKind.BONUSES],
        discounts=ledgers[LedgerKind.DISCOUNTS],
        overtime=ledgers[LedgerKind.OVERTIME],
        leaves=ledgers[LedgerKind.LEAVES],
        company=InMemoryCompany(monthly),
        users=InMemoryUsers(),
        checkins=InMemoryCheckIns(),
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def repos() -> SimpleNamespace:
    return make_repos()


@pytest.fixture
def container(repos):
    return assemble(
        employees_repo=repos.employees,
        attendance_repo=repos.attendance,
        advances_repo=repos.advances,
        bonuses_repo=repos.bonuses,
        discounts_repo=repos.discounts,
        overtime_repo=repos.overtime,
        leaves_repo=repos.leaves,
        company_repo=repos.company,
        users_repo=repos.users,
        checkins_repo=repos.checkins,
        settings=test_settings,
    )


@pytest.fixture
def admin(repos) -> Actor:
    user_id = repos.users.create_profile(
        email="admin@example.com",
        password_hash=generate_password_hash("admin-pass"),
        full_name="Admin",
        role=Role.ADMIN,
    )
    return Actor(user_id=user_id, role=Role.ADMIN)


@pytest.fixture
def employee_actor(repos, admin) -> Actor:
    user_id = repos.users.create_employee_account(
        email="worker@example.com",
        password_hash=generate_password_hash("worker-pass"),
        full_name="Worker",
        employee_number="E-100",
        created_by=admin.user_id,
    )
    return Actor(user_id=user_id, role=Role.EMPLOYEE)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(actor: Actor, name: str = "Tester"):
        with client.session_transaction() as sess:
            sess["user_id"] = actor.user_id
            sess["role"] = actor.role.value
            sess["name"] = name
        return client

    return _login
