from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import CompanyInfo
from .repository import MONTHLY_TABLES, CompanyRepository


class MySQLCompanyRepository(CompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[CompanyInfo]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT company_id, place_name, manager_name FROM company_info ORDER BY company_id LIMIT 1")
            r = fetchone(cur)
            if not r:
                return None
            return CompanyInfo(
                company_id=int(r["company_id"]),
                place_name=r["place_name"],
                manager_name=r["manager_name"],
            )

    def save(self, *, place_name: str, manager_name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT company_id FROM company_info ORDER BY company_id LIMIT 1 FOR UPDATE")
            r = fetchone(cur)
            if r:
                cur.execute(
                    "UPDATE company_info SET place_name=%s, manager_name=%s WHERE company_id=%s",
                    (place_name, manager_name, int(r["company_id"])),
                )
                return int(r["company_id"])

            cur.execute(
                "INSERT INTO company_info(place_name, manager_name) VALUES(%s,%s)",
                (place_name, manager_name),
            )
            return int(cur.lastrowid)

    def reset_monthly_data(self) -> dict[str, int]:
        deleted: dict[str, int] = {}
        with db_cursor(self._conn_factory) as (_, cur):
            for table in MONTHLY_TABLES:
                cur.execute(f"DELETE FROM {table}")
                deleted[table] = int(cur.rowcount)
        return deleted
