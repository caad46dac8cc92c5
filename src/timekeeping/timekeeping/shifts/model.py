from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Thực thể miền (domain): Ca làm việc gắn kèm bản ghi chấm công.

    Giờ bắt đầu/kết thúc là chuỗi "HH:MM" như nguồn dữ liệu trả về.
    """

    shift_name: str
    start_time: Optional[str]
    end_time: Optional[str]

    @property
    def label(self) -> str:
        return f"{self.start_time or '--:--'} - {self.end_time or '--:--'}"
