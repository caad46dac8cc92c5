from __future__ import annotations

import io
from datetime import date

import pytest
from openpyxl import load_workbook

from timekeeping.attendance.model import AttendanceRecord
from timekeeping.container import build_container
from timekeeping.main import create_app
from timekeeping.shifts.model import Shift

SHIFT = Shift(shift_name="Ca sáng", start_time="08:00", end_time="17:00")


class InMemoryAttendance:
    def __init__(self, records):
        self._records = records

    def list_for_employee(self, employee_id, *, start_date, end_date):
        return [
            r for r in self._records if r.employee_id == employee_id and start_date <= r.work_date <= end_date
        ]

    def list_for_department(self, department_id, *, start_date, end_date):
        return [r for r in self._records if start_date <= r.work_date <= end_date]


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    records = [
        AttendanceRecord(1, 1, date(2026, 3, 2), "08:30", "17:00", SHIFT, False, "Nguyễn An"),
        AttendanceRecord(2, 2, date(2026, 3, 2), "08:00", "16:00", SHIFT, True, "Trần Bình"),
        AttendanceRecord(3, 1, date(2026, 3, 3), "08:05", "17:00", SHIFT, False, "Nguyễn An"),
        AttendanceRecord(4, None, date(2026, 3, 3), "08:05", "17:00", SHIFT, False, None),
        AttendanceRecord(5, 1, date(2026, 4, 1), "09:00", "17:00", SHIFT, False, "Nguyễn An"),
    ]
    container = build_container(attendance_repo=InMemoryAttendance(records))
    app = create_app(container)
    with app.test_client() as c:
        yield c


def test_employee_timekeeping_lists_status(client):
    res = client.get("/api/timekeeping/employee/1?startDate=2026-03-01&endDate=2026-03-31")

    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert [r["status"] for r in body["data"]] == ["LATE", "ON_TIME"]


def test_department_timekeeping_rejects_bad_date(client):
    res = client.get("/api/timekeeping/department/1?startDate=01/03/2026")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_salary_summary_for_month(client):
    res = client.get("/api/payroll/department/1/summary?month=2026-03")

    assert res.status_code == 200
    body = res.get_json()
    assert body["period"] == "03/2026"
    assert body["startDate"] == "2026-03-01"
    assert body["endDate"] == "2026-03-31"
    assert body["data"] == [
        {"id": 1, "full_name": "Nguyễn An", "total_work_days": 2, "late_days": 1},
        {"id": 2, "full_name": "Trần Bình", "total_work_days": 1, "late_days": 0},
    ]


def test_salary_summary_rejects_bad_month(client):
    res = client.get("/api/payroll/department/1/summary?month=march")

    assert res.status_code == 400


def test_salary_summary_xlsx_download(client):
    res = client.get("/api/payroll/department/1/summary.xlsx?month=2026-03")

    assert res.status_code == 200
    assert "Bang_Cong_3_2026.xlsx" in res.headers["Content-Disposition"]
    ws = load_workbook(io.BytesIO(res.data)).active
    assert ws.cell(row=2, column=2).value == "Nguyễn An"


def test_salary_summary_csv_download(client):
    res = client.get("/api/payroll/department/1/summary.csv?month=2026-03")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "Bang_Cong_3_2026.csv" in res.headers["Content-Disposition"]


def test_scan_flow_checkin_twice_then_checkout(client):
    res = client.post("/api/sessions/7/scan", json={"type": "checkin", "decodedText": "qr-123"})
    assert res.status_code == 200
    assert res.get_json()["data"]["state"] == "ACTIVE"

    again = client.post("/api/sessions/7/scan", json={"type": "checkin", "decodedText": "qr-123"})
    assert again.status_code == 409
    assert again.get_json()["success"] is False

    elapsed = client.get("/api/sessions/7/elapsed").get_json()["data"]
    assert elapsed["state"] == "ACTIVE"
    assert elapsed["elapsed"] is not None

    out = client.post("/api/sessions/7/scan", json={"type": "checkout", "decodedText": "qr-123"})
    assert out.status_code == 200
    assert out.get_json()["data"] == {"state": "IDLE", "startedAt": None, "elapsed": None}


def test_cancel_is_safe_when_idle(client):
    res = client.post("/api/sessions/8/cancel")
    assert res.status_code == 200
    assert client.post("/api/sessions/8/cancel").get_json()["data"]["state"] == "IDLE"


def test_scan_with_unknown_type_is_rejected(client):
    res = client.post("/api/sessions/7/scan", json={"type": "break", "decodedText": "qr"})

    assert res.status_code == 400
