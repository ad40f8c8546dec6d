from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceLog:
    """Domain entity: one self-service check-in (at most one per user per day)."""

    log_id: int
    user_id: int
    employee_number: str
    full_name: str
    check_in_time: datetime
    log_date: date
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


@dataclass(frozen=True)
class Overview:
    total_accounts: int
    active_accounts: int
    today_checkins: int
    month_checkins: int
    recent: list[AttendanceLog]
