from __future__ import annotations

from typing import Any

from ..core.constants import MONTHS
from ..core.exceptions import ValidationError
from .fields import to_number


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_amount(value: Any, field_name: str = "Amount") -> float:
    amount = to_number(value)
    if amount <= 0:
        raise ValidationError(f"{field_name} must be a positive number")
    return amount


def require_month(value: str) -> str:
    """Return the canonical month name for any casing of it."""
    text = (value or "").strip().lower()
    for month in MONTHS:
        if month.lower() == text:
            return month
    raise ValidationError(f"Unknown month: {value!r}")


def require_year(value: Any) -> int:
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid year: {value!r}")
    if year < 1900 or year > 9999:
        raise ValidationError(f"Invalid year: {value!r}")
    return year
