from __future__ import annotations

import logging
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds
from .aggregator import TimekeepingAggregator
from .model import SalaryReport

logger = logging.getLogger(__name__)


class PayrollReportService:
    """Use case: monthly work-day summary for a department."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        aggregator: Optional[TimekeepingAggregator] = None,
    ):
        self._attendance = attendance
        self._aggregator = aggregator or TimekeepingAggregator()

    def build_monthly_summary(self, *, department_id: int, year: int, month: int) -> SalaryReport:
        start, end = month_bounds(year, month)
        records = self._attendance.list_for_department(department_id, start_date=start, end_date=end)

        result = self._aggregator.aggregate_with_stats(records)
        if result.skipped_records:
            logger.warning(
                "Skipped %d timekeeping record(s) without employee id (department=%s, period=%s..%s)",
                result.skipped_records,
                department_id,
                start,
                end,
            )

        return SalaryReport(start=start, end=end, summary=result.summary, skipped_records=result.skipped_records)
