from __future__ import annotations

from datetime import date, datetime, time

from ..core.constants import MONTHS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock(value: str) -> time:
    """Parse HH:MM[:SS] into time."""
    parts = value.strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=int(parts[0]), minute=int(parts[1]), second=seconds)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()


def month_name(value: date) -> str:
    return MONTHS[value.month - 1]


def current_period(today: date | None = None) -> tuple[str, int]:
    today = today or now_local().date()
    return month_name(today), today.year
