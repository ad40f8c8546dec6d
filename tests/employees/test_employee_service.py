from __future__ import annotations

import pytest

from src.payroll_ledger.payroll_ledger.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.payroll_ledger.payroll_ledger.employees.service import DUPLICATE_NUMBER_MESSAGE


def test_duplicate_number_conflicts_and_keeps_existing_row(container, admin):
    emp_id = container.employee_service.create(admin, employee_number="E-1", name="Ana")

    with pytest.raises(ConflictError) as exc:
        container.employee_service.create(admin, employee_number="E-1", name="Someone else")

    assert str(exc.value) == DUPLICATE_NUMBER_MESSAGE
    assert container.employee_service.get(admin, emp_id).name == "Ana"
    assert len(container.employee_service.list_all(admin)) == 1


def test_number_and_name_are_required(container, admin):
    with pytest.raises(ValidationError):
        container.employee_service.create(admin, employee_number=" ", name="Ana")
    with pytest.raises(ValidationError):
        container.employee_service.create(admin, employee_number="E-1", name="")


def test_search_matches_name_or_number(container, admin):
    container.employee_service.create(admin, employee_number="E-2", name="Ben")
    container.employee_service.create(admin, employee_number="E-1", name="Ana")
    container.employee_service.create(admin, employee_number="X-9", name="Carla")

    assert [e.employee_number for e in container.employee_service.list_all(admin)] == ["E-1", "E-2", "X-9"]
    assert [e.name for e in container.employee_service.list_all(admin, search="carla")] == ["Carla"]
    assert [e.name for e in container.employee_service.list_all(admin, search="e-")] == ["Ana", "Ben"]


def test_rename_keeps_number(container, admin):
    emp_id = container.employee_service.create(admin, employee_number="E-1", name="Ana")
    container.employee_service.rename(admin, employee_id=emp_id, name="Ana Maria")

    emp = container.employee_service.get(admin, emp_id)
    assert (emp.employee_number, emp.name) == ("E-1", "Ana Maria")


def test_rename_missing_employee_is_not_found(container, admin):
    with pytest.raises(NotFoundError):
        container.employee_service.rename(admin, employee_id=3, name="X")


def test_delete_cascades_to_ledgers(container, repos, admin):
    emp_id = container.employee_service.create(admin, employee_number="E-1", name="Ana")
    keep_id = container.employee_service.create(admin, employee_number="E-2", name="Ben")
    container.attendance_service.record_status(admin, employee_id=emp_id, work_date="2024-01-01", status="present")
    container.advance_service.create(admin, employee_id=emp_id, amount=10)
    container.bonus_service.create(admin, employee_id=keep_id, days=1, reason="Kept")

    container.employee_service.delete(admin, employee_id=emp_id)

    assert repos.attendance.by_key == {}
    assert repos.advances.rows == {}
    assert len(repos.bonuses.rows) == 1
    with pytest.raises(NotFoundError):
        container.employee_service.delete(admin, employee_id=emp_id)
