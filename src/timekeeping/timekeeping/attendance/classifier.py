from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.time_utils import time_to_minutes
from ..core.constants import DEFAULT_LATE_THRESHOLD_MINUTES
from ..core.enums import AttendanceStatus
from ..core.exceptions import MalformedTimeError
from .model import AttendanceRecord


@dataclass(frozen=True)
class AttendanceClassifier:
    """Derive an AttendanceStatus from one record.

    A check-in counts as late only when it is strictly after
    shift start + late_threshold_minutes; equality is on time.
    """

    late_threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES

    def is_late(self, record: AttendanceRecord) -> Optional[bool]:
        """True/False, or None when the comparison cannot be decided."""
        shift_start = record.shift.start_time if record.shift else None
        if not record.check_in_time or not shift_start:
            return None

        try:
            check_in_minutes = time_to_minutes(record.check_in_time)
            shift_start_minutes = time_to_minutes(shift_start)
        except MalformedTimeError:
            return None

        return check_in_minutes > shift_start_minutes + self.late_threshold_minutes

    def classify(self, record: AttendanceRecord) -> AttendanceStatus:
        is_late = self.is_late(record)
        if is_late is None:
            return AttendanceStatus.UNDETERMINED

        is_early = bool(record.is_early_leave)
        if is_late and is_early:
            return AttendanceStatus.LATE_AND_EARLY_LEAVE
        if is_late:
            return AttendanceStatus.LATE
        if is_early:
            return AttendanceStatus.EARLY_LEAVE
        return AttendanceStatus.ON_TIME


def classify(record: AttendanceRecord, late_threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES) -> AttendanceStatus:
    return AttendanceClassifier(late_threshold_minutes=late_threshold_minutes).classify(record)
