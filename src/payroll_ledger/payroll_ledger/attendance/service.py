from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..common.validators import parse_date_field, require_id
from ..core.context import Actor, require_admin
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceKey, AttendanceRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    @staticmethod
    def _parse_status(value) -> AttendanceStatus:
        if isinstance(value, AttendanceStatus):
            return value
        try:
            return AttendanceStatus(str(value or "").strip().lower())
        except ValueError:
            raise ValidationError("Status must be 'present' or 'absent'")

    def record_status(self, actor: Actor, *, employee_id, work_date, status) -> int:
        """Set the status for (employee, date); a second write replaces the first."""

        require_admin(actor)
        key = AttendanceKey(
            employee_id=require_id(employee_id, "Employee"),
            work_date=parse_date_field(work_date, "Date"),
        )
        parsed = self._parse_status(status)

        previous = self._attendance.get(key)
        record_id = self._attendance.replace_status(key, parsed)
        logger.info(
            "user %s recorded %s for employee %s on %s (was %s)",
            actor.user_id, parsed.value, key.employee_id, key.work_date,
            previous.status.value if previous else "unset",
        )
        return record_id

    def list_for_employee(self, actor: Actor, employee_id: int) -> Sequence[AttendanceRow]:
        require_admin(actor)
        return self._attendance.list_for_employee(require_id(employee_id, "Employee"))

    def delete(self, actor: Actor, *, record_id: int) -> None:
        require_admin(actor)
        if not self._attendance.delete(record_id=require_id(record_id, "Record")):
            raise NotFoundError("Attendance record does not exist")
        logger.info("user %s deleted attendance record %s", actor.user_id, record_id)

    @staticmethod
    def status_label(status: AttendanceStatus) -> str:
        return {
            AttendanceStatus.PRESENT: "Present",
            AttendanceStatus.ABSENT: "Absent",
        }[status]

    def to_ui(self, row: AttendanceRow) -> dict:
        return {
            "record_id": row.record_id,
            "employee_id": row.employee_id,
            "employee_number": row.employee_number,
            "employee_name": row.employee_name,
            "date": row.work_date.strftime("%Y-%m-%d") if isinstance(row.work_date, date) else str(row.work_date),
            "status": row.status.value,
            "status_label": self.status_label(row.status),
        }
