from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Sequence, TypeVar

from ..core.enums import LedgerKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Advance, Bonus, Discount, LeaveEntry, LedgerRow, OvertimeEntry
from .repository import LedgerRepository

E = TypeVar("E")


@dataclass(frozen=True)
class LedgerTable:
    """Maps one ledger entity onto its table."""

    name: str
    entity: type
    insert_columns: tuple[str, ...]
    update_columns: tuple[str, ...]
    order_by: str

    @property
    def select_columns(self) -> tuple[str, ...]:
        return tuple(f.name for f in fields(self.entity))


LEDGER_TABLES: dict[LedgerKind, LedgerTable] = {
    LedgerKind.ADVANCES: LedgerTable(
        name="advances",
        entity=Advance,
        insert_columns=("employee_id", "amount", "entry_date"),
        update_columns=("employee_id", "amount"),
        order_by="entry_date",
    ),
    LedgerKind.BONUSES: LedgerTable(
        name="bonuses",
        entity=Bonus,
        insert_columns=("employee_id", "days", "reason", "entry_date"),
        update_columns=("employee_id", "days", "reason"),
        order_by="entry_date",
    ),
    LedgerKind.DISCOUNTS: LedgerTable(
        name="discounts",
        entity=Discount,
        insert_columns=("employee_id", "days", "reason", "entry_date"),
        update_columns=("employee_id", "days", "reason"),
        order_by="entry_date",
    ),
    LedgerKind.OVERTIME: LedgerTable(
        name="overtime",
        entity=OvertimeEntry,
        insert_columns=("employee_id", "hours", "calculated_days", "notes", "entry_date"),
        update_columns=("employee_id", "hours", "calculated_days", "notes"),
        order_by="entry_date",
    ),
    LedgerKind.LEAVES: LedgerTable(
        name="leaves",
        entity=LeaveEntry,
        insert_columns=("employee_id", "start_date", "end_date", "reason", "calculated_days", "day_rule_version"),
        update_columns=("employee_id", "start_date", "end_date", "reason", "calculated_days", "day_rule_version"),
        order_by="start_date",
    ),
}


class MySQLLedgerRepository(LedgerRepository[E]):
    def __init__(self, conn_factory: DatabaseConnection, table: LedgerTable):
        self._conn_factory = conn_factory
        self._table = table

    @classmethod
    def for_kind(cls, conn_factory: DatabaseConnection, kind: LedgerKind) -> "MySQLLedgerRepository":
        return cls(conn_factory, LEDGER_TABLES[kind])

    def _to_entity(self, r: dict[str, Any]) -> E:
        return self._table.entity(**{col: r[col] for col in self._table.select_columns})

    def create(self, entry: E) -> int:
        cols = self._table.insert_columns
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {self._table.name}({', '.join(cols)}) VALUES({', '.join(['%s'] * len(cols))})",
                tuple(getattr(entry, c) for c in cols),
            )
            return int(cur.lastrowid)

    def update(self, entry: E) -> bool:
        cols = self._table.update_columns
        assignments = ", ".join(f"{c}=%s" for c in cols)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE {self._table.name} SET {assignments} WHERE entry_id=%s",
                tuple(getattr(entry, c) for c in cols) + (int(getattr(entry, "entry_id")),),
            )
            # rowcount is 0 when the values are unchanged; existence decides success.
            if cur.rowcount > 0:
                return True
            cur.execute(f"SELECT 1 FROM {self._table.name} WHERE entry_id=%s", (int(getattr(entry, "entry_id")),))
            return cur.fetchone() is not None

    def delete(self, *, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self._table.name} WHERE entry_id=%s", (int(entry_id),))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[LedgerRow[E]]:
        cols = ", ".join(f"t.{c}" for c in self._table.select_columns)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {cols}, e.employee_number, e.name AS employee_name
                FROM {self._table.name} t
                JOIN employees e ON e.employee_id = t.employee_id
                ORDER BY t.{self._table.order_by} DESC, t.entry_id DESC
                """
            )
            return [
                LedgerRow(
                    entry=self._to_entity(r),
                    employee_number=r["employee_number"],
                    employee_name=r["employee_name"],
                )
                for r in fetchall(cur)
            ]

    def list_for_employee(self, employee_id: int) -> Sequence[E]:
        cols = ", ".join(self._table.select_columns)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {cols} FROM {self._table.name}
                WHERE employee_id=%s
                ORDER BY {self._table.order_by} DESC, entry_id DESC
                """,
                (int(employee_id),),
            )
            return [self._to_entity(r) for r in fetchall(cur)]
