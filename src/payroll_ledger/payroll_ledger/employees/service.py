from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_id, require_non_empty
from ..core.context import Actor, require_admin
from ..core.exceptions import ConflictError, NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

DUPLICATE_NUMBER_MESSAGE = "Employee number already exists"


class EmployeeService:
    """Use case: manage the employee registry (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self, actor: Actor, *, search: Optional[str] = None) -> Sequence[Employee]:
        require_admin(actor)
        term = (search or "").strip() or None
        return self._employees.list_all(search=term)

    def get(self, actor: Actor, employee_id: int) -> Employee:
        require_admin(actor)
        employee = self._employees.get_by_id(require_id(employee_id, "Employee"))
        if not employee:
            raise NotFoundError("Employee does not exist")
        return employee

    def create(self, actor: Actor, *, employee_number: str, name: str) -> int:
        require_admin(actor)
        employee_number = require_non_empty(employee_number, "Employee number")
        name = require_non_empty(name, "Name")

        if self._employees.get_by_number(employee_number):
            raise ConflictError(DUPLICATE_NUMBER_MESSAGE)
        try:
            employee_id = self._employees.create(employee_number=employee_number, name=name)
        except ConflictError:
            # Lost a race with another insert of the same number.
            raise ConflictError(DUPLICATE_NUMBER_MESSAGE)

        logger.info("user %s created employee %s (%s)", actor.user_id, employee_id, employee_number)
        return employee_id

    def rename(self, actor: Actor, *, employee_id: int, name: str) -> None:
        require_admin(actor)
        employee_id = require_id(employee_id, "Employee")
        name = require_non_empty(name, "Name")

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee does not exist")
        self._employees.rename(employee_id=employee_id, name=name)
        logger.info("user %s renamed employee %s", actor.user_id, employee_id)

    def delete(self, actor: Actor, *, employee_id: int) -> None:
        require_admin(actor)
        if not self._employees.delete(employee_id=require_id(employee_id, "Employee")):
            raise NotFoundError("Employee does not exist")
        logger.info("user %s deleted employee %s with all ledger rows", actor.user_id, employee_id)
