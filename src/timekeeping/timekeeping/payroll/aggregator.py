from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..attendance.classifier import AttendanceClassifier
from ..attendance.model import AttendanceRecord, EmployeeId
from ..core.constants import DEFAULT_LATE_THRESHOLD_MINUTES, UNKNOWN_EMPLOYEE_NAME
from .model import EmployeeSalarySummary


@dataclass
class _Tally:
    employee_id: EmployeeId
    full_name: str
    total_work_days: int = 0
    late_days: int = 0


@dataclass(frozen=True)
class AggregationResult:
    summary: list[EmployeeSalarySummary]
    skipped_records: int = 0


@dataclass(frozen=True)
class TimekeepingAggregator:
    """Group records by employee and count work days and late days.

    Every record with an employee id is one work day, whatever its
    completeness. Records without an employee id are left out of the totals.
    Output keeps the order in which employees are first seen.
    """

    classifier: AttendanceClassifier = field(default_factory=AttendanceClassifier)

    def aggregate(self, records: Iterable[AttendanceRecord]) -> list[EmployeeSalarySummary]:
        return self.aggregate_with_stats(records).summary

    def aggregate_with_stats(self, records: Iterable[AttendanceRecord]) -> AggregationResult:
        tallies: dict[EmployeeId, _Tally] = {}
        skipped = 0

        for r in records:
            if r.employee_id is None or r.employee_id == "":
                skipped += 1
                continue

            t = tallies.get(r.employee_id)
            if t is None:
                t = _Tally(employee_id=r.employee_id, full_name=r.full_name or UNKNOWN_EMPLOYEE_NAME)
                tallies[r.employee_id] = t

            t.total_work_days += 1
            if self.classifier.classify(r).is_late:
                t.late_days += 1

        summary = [
            EmployeeSalarySummary(
                employee_id=t.employee_id,
                full_name=t.full_name,
                total_work_days=t.total_work_days,
                late_days=t.late_days,
            )
            for t in tallies.values()
        ]
        return AggregationResult(summary=summary, skipped_records=skipped)


def aggregate(
    records: Iterable[AttendanceRecord],
    late_threshold_minutes: Optional[int] = None,
) -> list[EmployeeSalarySummary]:
    threshold = DEFAULT_LATE_THRESHOLD_MINUTES if late_threshold_minutes is None else late_threshold_minutes
    classifier = AttendanceClassifier(late_threshold_minutes=threshold)
    return TimekeepingAggregator(classifier=classifier).aggregate(records)
