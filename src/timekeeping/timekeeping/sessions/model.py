from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Mapping

from ..common.validators import require_non_empty
from ..core.enums import ScanType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkSession:
    """Phiên làm việc đang mở trên thiết bị, tạo ra khi check-in thành công."""

    started_at: datetime


@dataclass(frozen=True)
class ElapsedTime:
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "ElapsedTime":
        total = max(int(delta.total_seconds()), 0)
        return cls(hours=total // 3600, minutes=(total % 3600) // 60, seconds=total % 60)

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes:02d}:{self.seconds:02d}"


@dataclass(frozen=True)
class ScanEvent:
    """Sự kiện quét QR đã giải mã; decoded_text là token mờ, không phân tích."""

    scan_type: ScanType
    decoded_text: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ScanEvent":
        raw_type = str(payload.get("type") or "").strip().lower()
        try:
            scan_type = ScanType(raw_type)
        except ValueError as exc:
            raise ValidationError(f"Loại quét không hợp lệ: {raw_type!r}") from exc

        decoded_text = require_non_empty(str(payload.get("decodedText") or ""), "Mã QR")
        return cls(scan_type=scan_type, decoded_text=decoded_text)
