from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from src.payroll_ledger.payroll_ledger.checkins.service import ALREADY_CHECKED_IN
from src.payroll_ledger.payroll_ledger.core.exceptions import AuthorizationError, ValidationError


def test_check_in_once_per_day(container, repos, employee_actor, fixed_now):
    log_id = container.checkin_service.check_in(employee_actor, now=fixed_now, ip_address="10.0.0.1", user_agent="pytest")

    log = repos.checkins.logs[log_id]
    assert log.log_date == fixed_now.date()
    assert log.employee_number == "E-100"
    assert log.ip_address == "10.0.0.1"

    with pytest.raises(ValidationError) as exc:
        container.checkin_service.check_in(employee_actor, now=fixed_now + timedelta(hours=2))
    assert str(exc.value) == ALREADY_CHECKED_IN
    assert len(repos.checkins.logs) == 1


def test_lost_race_on_unique_key_reads_as_already_checked_in(container, repos, employee_actor, fixed_now, monkeypatch):
    container.checkin_service.check_in(employee_actor, now=fixed_now)
    # Simulate the pre-check missing the row written by a concurrent request.
    monkeypatch.setattr(repos.checkins, "get_for_user_and_date", lambda user_id, log_date: None)

    with pytest.raises(ValidationError) as exc:
        container.checkin_service.check_in(employee_actor, now=fixed_now)
    assert str(exc.value) == ALREADY_CHECKED_IN


def test_disabled_account_cannot_check_in(container, admin, employee_actor, fixed_now):
    container.account_service.set_active(admin, user_id=employee_actor.user_id, is_active=False)

    with pytest.raises(ValidationError):
        container.checkin_service.check_in(employee_actor, now=fixed_now)


def test_recent_for_self_returns_last_five(container, employee_actor, fixed_now):
    for i in range(7):
        container.checkin_service.check_in(employee_actor, now=fixed_now - timedelta(days=i))

    recent = container.checkin_service.recent_for_self(employee_actor)
    assert len(recent) == 5
    assert recent[0].log_date == fixed_now.date()
    assert container.checkin_service.today_for_self(employee_actor, today=fixed_now.date()) is not None


def test_admin_log_filters(container, admin, employee_actor, fixed_now):
    other = container.account_service.create_employee_account(
        admin, email="zed@example.com", password="secret1", full_name="Zed", employee_number="Z-1"
    )
    from src.payroll_ledger.payroll_ledger.core.context import Actor
    from src.payroll_ledger.payroll_ledger.core.enums import Role

    zed = Actor(user_id=other, role=Role.EMPLOYEE)
    container.checkin_service.check_in(employee_actor, now=fixed_now - timedelta(days=1))
    container.checkin_service.check_in(employee_actor, now=fixed_now)
    container.checkin_service.check_in(zed, now=fixed_now)

    svc = container.checkin_service
    assert len(svc.list_logs(admin)) == 3
    assert len(svc.list_logs(admin, start_date=fixed_now.date())) == 2
    assert [l.full_name for l in svc.list_logs(admin, search="z-1")] == ["Zed"]
    assert {l.user_id for l in svc.list_logs(admin, user_id=employee_actor.user_id)} == {employee_actor.user_id}

    with pytest.raises(ValidationError):
        svc.list_logs(admin, start_date=date(2026, 2, 5), end_date=date(2026, 2, 1))
    with pytest.raises(AuthorizationError):
        svc.list_logs(employee_actor)


def test_overview_counts(container, admin, employee_actor, fixed_now):
    container.checkin_service.check_in(employee_actor, now=fixed_now - timedelta(days=1))
    container.checkin_service.check_in(employee_actor, now=fixed_now)
    container.checkin_service.check_in(employee_actor, now=datetime(2026, 1, 20, 9, 0))

    ov = container.checkin_service.overview(admin, today=fixed_now.date())
    assert ov.total_accounts == 1
    assert ov.active_accounts == 1
    assert ov.today_checkins == 1
    assert ov.month_checkins == 2
    assert len(ov.recent) == 3
