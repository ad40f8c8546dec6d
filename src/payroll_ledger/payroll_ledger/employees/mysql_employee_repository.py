from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        employee_number=r["employee_number"],
        name=r["name"],
        created_at=r.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, employee_number, name, created_at FROM employees WHERE employee_id=%s",
                (int(employee_id),),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_by_number(self, employee_number: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, employee_number, name, created_at FROM employees WHERE employee_number=%s",
                (employee_number,),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(self, *, employee_number: str, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO employees(employee_number, name) VALUES(%s,%s)",
                (employee_number, name),
            )
            return int(cur.lastrowid)

    def rename(self, *, employee_id: int, name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET name=%s WHERE employee_id=%s", (name, int(employee_id)))
            return cur.rowcount > 0

    def delete(self, *, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def list_all(self, *, search: Optional[str] = None) -> Sequence[Employee]:
        sql = "SELECT employee_id, employee_number, name, created_at FROM employees"
        params: tuple = ()
        if search:
            sql += " WHERE LOWER(name) LIKE %s OR LOWER(employee_number) LIKE %s"
            like = f"%{search.lower()}%"
            params = (like, like)
        sql += " ORDER BY employee_number"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_employee(r) for r in fetchall(cur)]
