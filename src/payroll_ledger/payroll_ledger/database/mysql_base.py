from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConflictError, NotFoundError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection, one transaction: commit on success, rollback on error.

    Integrity errors raised by MySQL are translated into domain errors so
    services never see driver exceptions for uniqueness / foreign keys.
    """

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as e:
        conn.rollback()
        raise translate_integrity_error(e) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def translate_integrity_error(error: mysql.connector.IntegrityError) -> Exception:
    if error.errno == errorcode.ER_DUP_ENTRY:
        return ConflictError("Record already exists")
    if error.errno in (errorcode.ER_NO_REFERENCED_ROW, errorcode.ER_NO_REFERENCED_ROW_2):
        return NotFoundError("Referenced record does not exist")
    return error


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
