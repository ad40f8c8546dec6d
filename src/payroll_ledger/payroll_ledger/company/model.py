from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CompanyInfo:
    """Singleton shown on report headers.

    `company_id` is None while nothing has been saved yet (display defaults).
    """

    company_id: Optional[int]
    place_name: str
    manager_name: str

    @property
    def is_saved(self) -> bool:
        return self.company_id is not None
