from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Ngày không hợp lệ: {value!r}") from exc


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM (HTML month input) into (year, month)."""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Tháng không hợp lệ: {value!r}") from exc
    return parsed.year, parsed.month


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of the given month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
