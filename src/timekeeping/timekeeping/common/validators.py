from __future__ import annotations

from datetime import date

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return value.strip()


def require_date_range(start: date, end: date) -> tuple[date, date]:
    if start > end:
        raise ValidationError("Ngày bắt đầu phải trước hoặc bằng ngày kết thúc")
    return start, end
