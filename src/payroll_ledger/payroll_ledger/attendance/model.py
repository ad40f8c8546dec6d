from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceKey:
    """Composite key of the attendance ledger: one status per employee per day."""

    employee_id: int
    work_date: date


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: daily attendance status of one employee."""

    record_id: int
    employee_id: int
    work_date: date
    status: AttendanceStatus

    @property
    def key(self) -> AttendanceKey:
        return AttendanceKey(employee_id=self.employee_id, work_date=self.work_date)


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for listings (record joined with employee display fields)."""

    record_id: int
    employee_id: int
    employee_number: str
    employee_name: str
    work_date: date
    status: AttendanceStatus
