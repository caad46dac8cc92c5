from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..core.enums import AttendanceStatus
from ..shifts.model import Shift

EmployeeId = Union[int, str]


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công của một nhân viên trong một ngày.

    check_in_time/check_out_time là chuỗi "HH:MM", None khi chưa ghi nhận.
    is_early_leave được tính sẵn ở hệ thống nguồn.
    """

    record_id: int
    employee_id: Optional[EmployeeId]
    work_date: date
    check_in_time: Optional[str]
    check_out_time: Optional[str]
    shift: Optional[Shift]
    is_early_leave: bool = False
    full_name: Optional[str] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model phục vụ hiển thị bảng chấm công."""

    record_id: int
    employee_id: Optional[EmployeeId]
    full_name: str
    work_date: date
    shift_name: str
    shift_time: str
    check_in: str
    check_out: str
    status: AttendanceStatus
    status_label: str
    note: str

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "shift_name": self.shift_name,
            "shift_time": self.shift_time,
            "check_in": self.check_in,
            "check_out": self.check_out,
            "status": self.status.value,
            "status_label": self.status_label,
            "note": self.note,
        }
