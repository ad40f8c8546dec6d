from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used by the access gate."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Daily attendance status stored per (employee, date)."""

    PRESENT = "present"
    ABSENT = "absent"


class LedgerKind(str, Enum):
    """Adjustment ledgers kept per employee."""

    ADVANCES = "advances"
    BONUSES = "bonuses"
    DISCOUNTS = "discounts"
    OVERTIME = "overtime"
    LEAVES = "leaves"
