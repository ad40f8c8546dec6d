from __future__ import annotations

from datetime import date
from decimal import Decimal

from ...core.constants import DAY_RULE_VERSION, OVERTIME_HOURS_PER_DAY
from ...core.exceptions import ValidationError
from .base import LeaveDayCalculator, OvertimeCalculator


class InclusiveDayCalculator(LeaveDayCalculator):
    """Standard rule: both endpoints count, so start == end is one day."""

    version = DAY_RULE_VERSION

    def days_between(self, start: date, end: date) -> int:
        if end < start:
            raise ValidationError("End date must be on or after the start date")
        return (end - start).days + 1


class StandardOvertimeCalculator(OvertimeCalculator):
    """Standard rule: hours / 8, fractional days kept as-is."""

    def __init__(self, hours_per_day: Decimal = OVERTIME_HOURS_PER_DAY):
        self._hours_per_day = Decimal(hours_per_day)

    def days_for_hours(self, hours: Decimal) -> Decimal:
        hours = Decimal(hours)
        if hours < 0:
            raise ValidationError("Hours cannot be negative")
        return hours / self._hours_per_day


_DAYS = InclusiveDayCalculator()
_OVERTIME = StandardOvertimeCalculator()


def day_range(start: date, end: date) -> int:
    return _DAYS.days_between(start, end)


def overtime_days(hours) -> Decimal:
    return _OVERTIME.days_for_hours(Decimal(str(hours)))
