from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from src.payroll_ledger.payroll_ledger.core.exceptions import AuthorizationError, NotFoundError


def test_summary_of_employee_without_rows_is_all_zero(container, admin):
    emp_id = container.employee_service.create(admin, employee_number="E-1", name="Ana")

    s = container.summary_service.build_summary(admin, emp_id)

    assert s.employee.employee_number == "E-1"
    assert (s.attendance_days, s.absence_days) == (0, 0)
    assert s.total_advances == 0
    assert s.total_bonus_days == 0
    assert s.total_discount_days == 0
    assert s.total_leave_days == 0
    assert s.total_overtime_days == 0


def test_summary_folds_every_ledger(container, admin):
    emp_id = container.employee_service.create(admin, employee_number="E-1", name="Ana")
    other_id = container.employee_service.create(admin, employee_number="E-2", name="Ben")
    start = date(2024, 1, 1)

    for i in range(3):
        container.attendance_service.record_status(
            admin, employee_id=emp_id, work_date=start + timedelta(days=i), status="present"
        )
    for i in range(3, 5):
        container.attendance_service.record_status(
            admin, employee_id=emp_id, work_date=start + timedelta(days=i), status="absent"
        )
    container.advance_service.create(admin, employee_id=emp_id, amount="100")
    container.advance_service.create(admin, employee_id=emp_id, amount=50)
    container.bonus_service.create(admin, employee_id=emp_id, days=2, reason="Weekend shift")
    container.discount_service.create(admin, employee_id=emp_id, days=1, reason="Late")
    container.overtime_service.create(admin, employee_id=emp_id, hours=16)
    container.leave_service.create(
        admin, employee_id=emp_id, start_date="2024-01-10", end_date="2024-01-12", reason="Family"
    )
    # Rows of another employee never leak into the summary.
    container.advance_service.create(admin, employee_id=other_id, amount=999)

    s = container.summary_service.build_summary(admin, emp_id)

    assert s.attendance_days == 3
    assert s.absence_days == 2
    assert s.total_advances == Decimal("150")
    assert s.total_bonus_days == Decimal("2")
    assert s.total_discount_days == Decimal("1")
    assert float(s.total_overtime_days) == 2.0
    assert s.total_leave_days == 3
    assert s.net_adjustment_days == Decimal("1")


def test_summary_for_missing_employee_is_not_found(container, admin):
    with pytest.raises(NotFoundError):
        container.summary_service.build_summary(admin, 404)


def test_summary_is_admin_only(container, employee_actor):
    with pytest.raises(AuthorizationError):
        container.summary_service.build_summary(employee_actor, 1)


def test_summary_fails_whole_when_a_read_fails(container, repos, admin, monkeypatch):
    emp_id = container.employee_service.create(admin, employee_number="E-1", name="Ana")

    def boom(employee_id):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(repos.overtime, "list_for_employee", boom)

    with pytest.raises(RuntimeError):
        container.summary_service.build_summary(admin, emp_id)
