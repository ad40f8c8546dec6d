from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..employees.model import Employee


@dataclass(frozen=True)
class EmployeeSummary:
    """Read-model: totals of every ledger for one employee (never persisted)."""

    employee: Employee
    attendance_days: int
    absence_days: int
    total_advances: Decimal
    total_bonus_days: Decimal
    total_discount_days: Decimal
    total_leave_days: int
    total_overtime_days: Decimal

    @property
    def net_adjustment_days(self) -> Decimal:
        """Bonus days minus discount days (discounts are stored positive)."""

        return self.total_bonus_days - self.total_discount_days
