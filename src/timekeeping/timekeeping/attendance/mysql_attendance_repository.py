from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, format_mysql_time
from ..shifts.model import Shift
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT_RECORDS = """
    SELECT
        t.id, t.employee_id, e.full_name, t.work_date,
        t.check_in_time, t.check_out_time, t.is_early_leave, t.note,
        s.shift_name, s.start_time, s.end_time
    FROM timekeeping t
    LEFT JOIN employees e ON e.id = t.employee_id
    LEFT JOIN shifts s ON s.id = t.shift_id
"""


class MySQLAttendanceRepository(AttendanceRepository):
    """Reads timekeeping rows joined with employee name and shift times.

    Rows are returned ordered by work date then record id so aggregation
    output is stable across calls.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_RECORDS
                + """
                WHERE t.employee_id=%s AND t.work_date BETWEEN %s AND %s
                ORDER BY t.work_date ASC, t.id ASC
                """,
                (int(employee_id), start_date, end_date),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    def list_for_department(self, department_id: int, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_RECORDS
                + """
                WHERE t.department_id=%s AND t.work_date BETWEEN %s AND %s
                ORDER BY t.work_date ASC, t.id ASC
                """,
                (int(department_id), start_date, end_date),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    @staticmethod
    def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
        shift = None
        if r.get("shift_name") is not None or r.get("start_time") is not None:
            shift = Shift(
                shift_name=r.get("shift_name") or "",
                start_time=format_mysql_time(r.get("start_time")),
                end_time=format_mysql_time(r.get("end_time")),
            )

        employee_id = r.get("employee_id")
        return AttendanceRecord(
            record_id=int(r["id"]),
            employee_id=int(employee_id) if employee_id is not None else None,
            full_name=r.get("full_name"),
            work_date=r["work_date"],
            check_in_time=format_mysql_time(r.get("check_in_time")),
            check_out_time=format_mysql_time(r.get("check_out_time")),
            shift=shift,
            is_early_leave=bool(r.get("is_early_leave")),
            note=r.get("note"),
        )
