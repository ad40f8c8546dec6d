from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee tracked by the ledgers.

    `employee_number` is assigned by a human and never changes after creation.
    """

    employee_id: int
    employee_number: str
    name: str
    created_at: Optional[datetime] = None
