from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceLog


class CheckInRepository(Protocol):
    def get_for_user_and_date(self, user_id: int, log_date: date) -> Optional[AttendanceLog]:
        raise NotImplementedError

    def create(
        self,
        *,
        user_id: int,
        employee_number: str,
        full_name: str,
        check_in_time: datetime,
        log_date: date,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def list_logs(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        user_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Sequence[AttendanceLog]:
        """Newest check-in first."""

        raise NotImplementedError
