from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class UserProfile:
    """Domain entity: a login identity (admin or employee).

    Note: Plain data object; the password hash never leaves the service layer.
    """

    user_id: int
    email: str
    password_hash: str
    full_name: str
    role: Role
    employee_number: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class EmployeeAccount:
    """Admin-facing record of an employee login, with check-in totals."""

    account_id: int
    user_id: int
    employee_number: str
    full_name: str
    email: str
    is_active: bool
    created_by: Optional[int]
    created_at: Optional[datetime] = None
    total_attendance_days: int = 0
    last_attendance: Optional[datetime] = None
