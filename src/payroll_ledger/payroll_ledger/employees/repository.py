from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_number(self, employee_number: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, employee_number: str, name: str) -> int:
        """Insert a new employee.

        Raises ConflictError when `employee_number` is already taken.
        """

        raise NotImplementedError

    def rename(self, *, employee_id: int, name: str) -> bool:
        raise NotImplementedError

    def delete(self, *, employee_id: int) -> bool:
        """Delete the employee; ledger rows go with it (ON DELETE CASCADE)."""

        raise NotImplementedError

    def list_all(self, *, search: Optional[str] = None) -> Sequence[Employee]:
        raise NotImplementedError
