from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_date_range
from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..core.enums import AttendanceStatus
from .classifier import AttendanceClassifier
from .model import AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository

STATUS_LABELS = {
    AttendanceStatus.ON_TIME: "Đúng giờ",
    AttendanceStatus.LATE: "Đi muộn",
    AttendanceStatus.EARLY_LEAVE: "Về sớm",
    AttendanceStatus.LATE_AND_EARLY_LEAVE: "Đi muộn & Về sớm",
    AttendanceStatus.UNDETERMINED: "Không xác định",
}


class AttendanceService:
    """Use case: list timekeeping records with their derived status."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        classifier: Optional[AttendanceClassifier] = None,
    ):
        self._attendance = attendance
        self._classifier = classifier or AttendanceClassifier()

    def get_employee_history(self, employee_id: int, *, start: date, end: date) -> list[AttendanceRow]:
        require_date_range(start, end)
        records = self._attendance.list_for_employee(employee_id, start_date=start, end_date=end)
        return self._to_rows(records)

    def get_department_records(self, department_id: int, *, start: date, end: date) -> list[AttendanceRow]:
        require_date_range(start, end)
        records = self._attendance.list_for_department(department_id, start_date=start, end_date=end)
        return self._to_rows(records)

    def _to_rows(self, records: Sequence[AttendanceRecord]) -> list[AttendanceRow]:
        return [self._to_row(r) for r in records]

    def _to_row(self, r: AttendanceRecord) -> AttendanceRow:
        status = self._classifier.classify(r)
        return AttendanceRow(
            record_id=r.record_id,
            employee_id=r.employee_id,
            full_name=r.full_name or UNKNOWN_EMPLOYEE_NAME,
            work_date=r.work_date,
            shift_name=r.shift.shift_name if r.shift else "-",
            shift_time=r.shift.label if r.shift else "-",
            check_in=r.check_in_time or "N/A",
            check_out=r.check_out_time or "---",
            status=status,
            status_label=STATUS_LABELS.get(status, status.value),
            note=r.note or "-",
        )
