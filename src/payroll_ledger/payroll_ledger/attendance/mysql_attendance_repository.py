from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceKey, AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_status(self, key: AttendanceKey, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            # LAST_INSERT_ID(expr) makes lastrowid report the existing row on update.
            cur.execute(
                """
                INSERT INTO attendance(employee_id, work_date, status)
                VALUES(%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE status=new.status, record_id=LAST_INSERT_ID(attendance.record_id)
                """,
                (int(key.employee_id), key.work_date, status.value),
            )
            return int(cur.lastrowid)

    def get(self, key: AttendanceKey) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, employee_id, work_date, status
                FROM attendance
                WHERE employee_id=%s AND work_date=%s
                """,
                (int(key.employee_id), key.work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                record_id=int(r["record_id"]),
                employee_id=int(r["employee_id"]),
                work_date=r["work_date"],
                status=AttendanceStatus(r["status"]),
            )

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.record_id, a.employee_id, e.employee_number, e.name AS employee_name,
                       a.work_date, a.status
                FROM attendance a
                JOIN employees e ON e.employee_id = a.employee_id
                WHERE a.employee_id=%s
                ORDER BY a.work_date DESC
                """,
                (int(employee_id),),
            )
            return [
                AttendanceRow(
                    record_id=int(r["record_id"]),
                    employee_id=int(r["employee_id"]),
                    employee_number=r["employee_number"],
                    employee_name=r["employee_name"],
                    work_date=r["work_date"],
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]

    def delete(self, *, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE record_id=%s", (int(record_id),))
            return cur.rowcount > 0
