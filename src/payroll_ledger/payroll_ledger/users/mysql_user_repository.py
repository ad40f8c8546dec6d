from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import EmployeeAccount, UserProfile
from .repository import UserRepository

_PROFILE_COLUMNS = "user_id, email, password_hash, full_name, role, employee_number, is_active"


def _to_profile(row: dict) -> UserProfile:
    return UserProfile(
        user_id=int(row["user_id"]),
        email=row["email"],
        password_hash=row["password_hash"],
        full_name=row["full_name"],
        role=Role(row["role"]),
        employee_number=row.get("employee_number"),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[UserProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_PROFILE_COLUMNS} FROM user_profiles WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_PROFILE_COLUMNS} FROM user_profiles WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def find_admin(self) -> Optional[UserProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_PROFILE_COLUMNS} FROM user_profiles WHERE role=%s ORDER BY user_id LIMIT 1",
                (Role.ADMIN.value,),
            )
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def create_profile(self, *, email: str, password_hash: str, full_name: str, role: Role) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO user_profiles(email, password_hash, full_name, role, is_active)
                VALUES(%s,%s,%s,%s,1)
                """,
                (email, password_hash, full_name, role.value),
            )
            return int(cur.lastrowid)

    def create_employee_account(
        self,
        *,
        email: str,
        password_hash: str,
        full_name: str,
        employee_number: str,
        created_by: int,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO user_profiles(email, password_hash, full_name, role, employee_number, is_active)
                VALUES(%s,%s,%s,%s,%s,1)
                """,
                (email, password_hash, full_name, Role.EMPLOYEE.value, employee_number),
            )
            user_id = int(cur.lastrowid)
            cur.execute(
                """
                INSERT INTO employee_accounts(user_id, employee_number, full_name, email, is_active, created_by)
                VALUES(%s,%s,%s,%s,1,%s)
                """,
                (user_id, employee_number, full_name, email, int(created_by)),
            )
            return user_id

    def set_active(self, user_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 FROM user_profiles WHERE user_id=%s", (int(user_id),))
            if cur.fetchone() is None:
                return False
            cur.execute("UPDATE user_profiles SET is_active=%s WHERE user_id=%s", (int(is_active), int(user_id)))
            cur.execute("UPDATE employee_accounts SET is_active=%s WHERE user_id=%s", (int(is_active), int(user_id)))
            return True

    def update_password_hash(self, user_id: int, *, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 FROM user_profiles WHERE user_id=%s", (int(user_id),))
            if cur.fetchone() is None:
                return False
            cur.execute("UPDATE user_profiles SET password_hash=%s WHERE user_id=%s", (password_hash, int(user_id)))
            return True

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM user_profiles WHERE user_id=%s", (int(user_id),))
            return cur.rowcount > 0

    def list_accounts(self) -> Sequence[EmployeeAccount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT ea.account_id, ea.user_id, ea.employee_number, ea.full_name, ea.email,
                       ea.is_active, ea.created_by, ea.created_at,
                       COUNT(al.log_id) AS total_attendance_days,
                       MAX(al.check_in_time) AS last_attendance
                FROM employee_accounts ea
                LEFT JOIN attendance_logs al ON al.user_id = ea.user_id
                GROUP BY ea.account_id, ea.user_id, ea.employee_number, ea.full_name, ea.email,
                         ea.is_active, ea.created_by, ea.created_at
                ORDER BY ea.created_at DESC, ea.account_id DESC
                """
            )
            return [
                EmployeeAccount(
                    account_id=int(r["account_id"]),
                    user_id=int(r["user_id"]),
                    employee_number=r["employee_number"],
                    full_name=r["full_name"],
                    email=r["email"],
                    is_active=bool(r["is_active"]),
                    created_by=r.get("created_by"),
                    created_at=r.get("created_at"),
                    total_attendance_days=int(r.get("total_attendance_days") or 0),
                    last_attendance=r.get("last_attendance"),
                )
                for r in fetchall(cur)
            ]
