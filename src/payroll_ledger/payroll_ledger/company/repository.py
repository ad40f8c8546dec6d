from __future__ import annotations

from typing import Optional, Protocol

from .model import CompanyInfo

MONTHLY_TABLES = ("attendance", "advances", "bonuses", "discounts", "overtime", "leaves")


class CompanyRepository(Protocol):
    def get(self) -> Optional[CompanyInfo]:
        raise NotImplementedError

    def save(self, *, place_name: str, manager_name: str) -> int:
        """Insert the singleton row the first time, update it afterwards."""

        raise NotImplementedError

    def reset_monthly_data(self) -> dict[str, int]:
        """Delete every row of the monthly ledgers in one transaction.

        Returns deleted row counts per table.
        """

        raise NotImplementedError
