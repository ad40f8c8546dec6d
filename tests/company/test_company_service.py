from __future__ import annotations

import pytest

from src.payroll_ledger.payroll_ledger.core.exceptions import AuthorizationError, ValidationError


def test_defaults_until_saved(container, repos):
    info = container.company_service.get_info()

    assert info.is_saved is False
    assert (info.place_name, info.manager_name) == ("My Company", "Manager")
    assert repos.company.info is None


def test_save_then_update(container, admin):
    first = container.company_service.save_info(admin, place_name="Depot", manager_name="Rita")
    second = container.company_service.save_info(admin, place_name="Depot 2", manager_name="Rita")

    assert first.company_id == second.company_id
    assert container.company_service.get_info().place_name == "Depot 2"


def test_both_names_required(container, admin):
    with pytest.raises(ValidationError):
        container.company_service.save_info(admin, place_name="Depot", manager_name=" ")


def test_month_reset_clears_ledgers_and_keeps_employees(container, repos, admin):
    emp_id = container.employee_service.create(admin, employee_number="E-1", name="Ana")
    container.company_service.save_info(admin, place_name="Depot", manager_name="Rita")
    container.attendance_service.record_status(admin, employee_id=emp_id, work_date="2024-01-01", status="present")
    container.advance_service.create(admin, employee_id=emp_id, amount=10)
    container.overtime_service.create(admin, employee_id=emp_id, hours=8)

    deleted = container.company_service.reset_month(admin)

    assert deleted["attendance"] == 1
    assert deleted["advances"] == 1
    assert deleted["overtime"] == 1
    assert deleted["leaves"] == 0
    summary = container.summary_service.build_summary(admin, emp_id)
    assert summary.attendance_days == 0
    assert summary.total_overtime_days == 0
    assert container.company_service.get_info().place_name == "Depot"


def test_reset_is_admin_only(container, employee_actor):
    with pytest.raises(AuthorizationError):
        container.company_service.reset_month(employee_actor)
