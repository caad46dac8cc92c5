from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..attendance.model import EmployeeId


@dataclass(frozen=True)
class EmployeeSalarySummary:
    """Tổng hợp công theo nhân viên cho một lần truy vấn (không lưu CSDL)."""

    employee_id: EmployeeId
    full_name: str
    total_work_days: int
    late_days: int

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "full_name": self.full_name,
            "total_work_days": self.total_work_days,
            "late_days": self.late_days,
        }


@dataclass(frozen=True)
class SalaryReport:
    start: date
    end: date
    summary: list[EmployeeSalarySummary]
    skipped_records: int = 0

    @property
    def period_label(self) -> str:
        return f"{self.start.month:02d}/{self.start.year}"
