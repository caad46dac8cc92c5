from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái chấm công suy ra từ giờ vào và cờ về sớm (không lưu CSDL)."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
    LATE_AND_EARLY_LEAVE = "LATE_AND_EARLY_LEAVE"
    UNDETERMINED = "UNDETERMINED"

    @property
    def is_late(self) -> bool:
        return self in (AttendanceStatus.LATE, AttendanceStatus.LATE_AND_EARLY_LEAVE)


class ScanType(str, Enum):
    """Loại sự kiện quét QR gửi từ thiết bị."""

    CHECKIN = "checkin"
    CHECKOUT = "checkout"


class SessionState(str, Enum):
    IDLE = "IDLE"
    ACTIVE = "ACTIVE"
