from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_id(value: Any, field_name: str) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is required")
    if parsed <= 0:
        raise ValidationError(f"{field_name} is required")
    return parsed


def parse_non_negative(
    value: Any,
    field_name: str,
    *,
    places: Optional[int] = None,
    max_value: Optional[Decimal] = None,
) -> Decimal:
    """Parse a user supplied magnitude (amount, days, hours).

    With `places` the value is rounded half-up the way a DECIMAL column
    stores it; `max_value` is the largest value that column holds.
    """

    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number")
    if not parsed.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    if parsed < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    if max_value is not None and parsed > max_value:
        raise ValidationError(f"{field_name} is too large")
    if places is not None:
        parsed = parsed.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return parsed


def parse_date_field(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def optional_text(value: Optional[str], field_name: str = "Text") -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return (value or "").strip() or None
