from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal


class LeaveDayCalculator(ABC):
    """Calculator interface for leave accrual (Strategy Pattern).

    `version` is stored next to every computed value; stored values are not
    recomputed on read, so a rule change needs a new version and a migration.
    """

    version: int

    @abstractmethod
    def days_between(self, start: date, end: date) -> int:
        raise NotImplementedError


class OvertimeCalculator(ABC):
    @abstractmethod
    def days_for_hours(self, hours: Decimal) -> Decimal:
        raise NotImplementedError
