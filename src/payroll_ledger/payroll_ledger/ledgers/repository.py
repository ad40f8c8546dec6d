from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

from .model import LedgerRow

E = TypeVar("E")


class LedgerRepository(Protocol[E]):
    """Repository interface shared by all adjustment ledgers.

    Entities are passed whole: `create` ignores `entry_id`, `update` uses it
    to find the row and replaces the editable columns.
    """

    def create(self, entry: E) -> int:
        raise NotImplementedError

    def update(self, entry: E) -> bool:
        raise NotImplementedError

    def delete(self, *, entry_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[LedgerRow[E]]:
        """All rows, newest first, joined with employee number and name."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[E]:
        raise NotImplementedError
