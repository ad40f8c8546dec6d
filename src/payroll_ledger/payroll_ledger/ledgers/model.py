from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Generic, Optional, TypeVar


@dataclass(frozen=True)
class Advance:
    """Cash advance paid to an employee."""

    entry_id: int
    employee_id: int
    amount: Decimal
    entry_date: date


@dataclass(frozen=True)
class DayAdjustment:
    """Bonus or discount expressed in days.

    `days` is always stored as a non-negative magnitude; `signed_days` applies
    the sign for display and totals that need it.
    """

    entry_id: int
    employee_id: int
    days: Decimal
    reason: str
    entry_date: date

    sign = 1

    @property
    def signed_days(self) -> Decimal:
        return Decimal(self.days) * self.sign


@dataclass(frozen=True)
class Bonus(DayAdjustment):
    sign = 1


@dataclass(frozen=True)
class Discount(DayAdjustment):
    sign = -1


@dataclass(frozen=True)
class OvertimeEntry:
    entry_id: int
    employee_id: int
    hours: Decimal
    calculated_days: Decimal
    notes: Optional[str]
    entry_date: date


@dataclass(frozen=True)
class LeaveEntry:
    entry_id: int
    employee_id: int
    start_date: date
    end_date: date
    reason: str
    calculated_days: int
    day_rule_version: int = 1


E = TypeVar("E")


@dataclass(frozen=True)
class LedgerRow(Generic[E]):
    """Read-model: a ledger entry joined with employee display fields."""

    entry: E
    employee_number: str
    employee_name: str
