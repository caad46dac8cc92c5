from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from timekeeping.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from timekeeping.database.connection import DBConfig
from timekeeping.database.mysql_base import format_mysql_time


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []
        self.closed = False

    def execute(self, sql, params):
        self.executed.append((sql, params))

    def fetchall(self):
        return self._rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, rows):
        self.cursor = FakeCursor(rows)
        self.connection = FakeConnection(self.cursor)

    def connect(self):
        return self.connection


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        (time(8, 5), "08:05"),
        (timedelta(hours=17, minutes=30, seconds=12), "17:30"),
        ("8:05:00", "08:05"),
        ("garbage", "garbage"),
        ("0²:05", "0²:05"),
        (3.5, "3.5"),
    ],
)
def test_format_mysql_time(value, expected):
    assert format_mysql_time(value) == expected


def test_unreadable_time_degrades_only_that_record():
    rows = [
        {
            "id": 21,
            "employee_id": 4,
            "full_name": "Phạm Dung",
            "work_date": date(2026, 3, 2),
            "check_in_time": b"08:00",
            "check_out_time": "1¹:00",
            "is_early_leave": 0,
            "note": None,
            "shift_name": "Ca sáng",
            "start_time": timedelta(hours=8),
            "end_time": timedelta(hours=17),
        },
    ]
    repo = MySQLAttendanceRepository(FakeConnFactory(rows))

    (record,) = repo.list_for_department(2, start_date=date(2026, 3, 1), end_date=date(2026, 3, 31))

    assert record.check_in_time == "b'08:00'"
    assert record.check_out_time == "1¹:00"


def test_department_query_maps_rows_to_records():
    rows = [
        {
            "id": 11,
            "employee_id": 4,
            "full_name": "Phạm Dung",
            "work_date": date(2026, 3, 2),
            "check_in_time": timedelta(hours=8, minutes=7),
            "check_out_time": None,
            "is_early_leave": 0,
            "note": None,
            "shift_name": "Ca sáng",
            "start_time": timedelta(hours=8),
            "end_time": timedelta(hours=17),
        },
        {
            "id": 12,
            "employee_id": None,
            "full_name": None,
            "work_date": date(2026, 3, 2),
            "check_in_time": None,
            "check_out_time": None,
            "is_early_leave": 1,
            "note": "Thiếu nhân viên",
            "shift_name": None,
            "start_time": None,
            "end_time": None,
        },
    ]
    factory = FakeConnFactory(rows)
    repo = MySQLAttendanceRepository(factory)

    records = repo.list_for_department(2, start_date=date(2026, 3, 1), end_date=date(2026, 3, 31))

    sql, params = factory.cursor.executed[0]
    assert "t.department_id=%s" in sql
    assert params == (2, date(2026, 3, 1), date(2026, 3, 31))
    assert factory.cursor.closed and factory.connection.closed

    first, second = records
    assert first.employee_id == 4
    assert first.check_in_time == "08:07"
    assert first.check_out_time is None
    assert first.shift.start_time == "08:00"
    assert first.is_early_leave is False
    assert second.employee_id is None
    assert second.shift is None
    assert second.is_early_leave is True


def test_employee_query_filters_by_employee():
    factory = FakeConnFactory([])
    repo = MySQLAttendanceRepository(factory)

    assert repo.list_for_employee(4, start_date=date(2026, 3, 1), end_date=date(2026, 3, 2)) == []
    sql, params = factory.cursor.executed[0]
    assert "t.employee_id=%s" in sql
    assert params == (4, date(2026, 3, 1), date(2026, 3, 2))


def test_db_config_from_settings_mapping():
    config = DBConfig.from_mapping({"host": "db", "user": "u", "password": "p", "database": "tk"})

    assert config.port == 3306
    assert config.connect_timeout == 10
    assert config.describe() == "u@db:3306/tk"
