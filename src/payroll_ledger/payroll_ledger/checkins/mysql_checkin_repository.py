from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceLog
from .repository import CheckInRepository

_COLUMNS = "log_id, user_id, employee_number, full_name, check_in_time, log_date, ip_address, user_agent"


def _to_log(r: dict) -> AttendanceLog:
    return AttendanceLog(
        log_id=int(r["log_id"]),
        user_id=int(r["user_id"]),
        employee_number=r.get("employee_number") or "",
        full_name=r["full_name"],
        check_in_time=r["check_in_time"],
        log_date=r["log_date"],
        ip_address=r.get("ip_address"),
        user_agent=r.get("user_agent"),
    )


class MySQLCheckInRepository(CheckInRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user_and_date(self, user_id: int, log_date: date) -> Optional[AttendanceLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_logs WHERE user_id=%s AND log_date=%s",
                (int(user_id), log_date),
            )
            r = fetchone(cur)
            return _to_log(r) if r else None

    def create(
        self,
        *,
        user_id: int,
        employee_number: str,
        full_name: str,
        check_in_time: datetime,
        log_date: date,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_logs(user_id, employee_number, full_name, check_in_time, log_date,
                                            ip_address, user_agent)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(user_id), employee_number, full_name, check_in_time, log_date, ip_address, user_agent),
            )
            return int(cur.lastrowid)

    def list_logs(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        user_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Sequence[AttendanceLog]:
        clauses: list[str] = []
        params: list[object] = []

        if start_date is not None:
            clauses.append("log_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("log_date <= %s")
            params.append(end_date)
        if user_id is not None:
            clauses.append("user_id = %s")
            params.append(int(user_id))

        sql = f"SELECT {_COLUMNS} FROM attendance_logs"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        sql += " ORDER BY check_in_time DESC"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_log(r) for r in fetchall(cur)]
