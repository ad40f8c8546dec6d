from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceKey, AttendanceRecord, AttendanceRow


class AttendanceRepository(Protocol):
    def replace_status(self, key: AttendanceKey, status: AttendanceStatus) -> int:
        """Keyed replace: insert, or overwrite the status stored under `key`.

        Returns the record id. Raises NotFoundError for an unknown employee.
        """

        raise NotImplementedError

    def get(self, key: AttendanceKey) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRow]:
        """Most recent date first."""

        raise NotImplementedError

    def delete(self, *, record_id: int) -> bool:
        raise NotImplementedError
