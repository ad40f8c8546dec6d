from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

HIDDEN_FIELDS = frozenset({"password_hash"})


def as_payload(value: Any) -> Any:
    """Convert domain objects into JSON-safe structures.

    Decimals become floats, dates "YYYY-MM-DD", datetimes "YYYY-MM-DD HH:MM:SS".
    """

    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, datetime):
        return value.isoformat(sep=" ", timespec="seconds")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: as_payload(getattr(value, f.name)) for f in fields(value) if f.name not in HIDDEN_FIELDS}
    if isinstance(value, dict):
        return {str(k): as_payload(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [as_payload(v) for v in value]
    return str(value)
