"""Write salary summaries to spreadsheet sinks.

Both writers return bytes so the caller decides where they go
(HTTP response, file on disk, e-mail attachment).
"""
from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

from .model import EmployeeSalarySummary, SalaryReport

SUMMARY_COLUMNS = ["ID", "Tên nhân viên", "Số công", "Số công đi muộn"]
COLUMN_WIDTHS = [15, 30, 15, 20]

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def summary_records(summary: Sequence[EmployeeSalarySummary]) -> list[dict]:
    return [
        {
            "ID": s.employee_id,
            "Tên nhân viên": s.full_name,
            "Số công": s.total_work_days,
            "Số công đi muộn": s.late_days,
        }
        for s in summary
    ]


def summary_filename(report: SalaryReport, *, extension: str = "xlsx") -> str:
    return f"Bang_Cong_{report.start.month}_{report.start.year}.{extension}"


def sheet_name(report: SalaryReport) -> str:
    # Excel forbids '/' in sheet titles.
    return f"Bảng công {report.start.month:02d}-{report.start.year}"


def write_summary_xlsx(report: SalaryReport) -> bytes:
    df = pd.DataFrame(summary_records(report.summary), columns=SUMMARY_COLUMNS)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        name = sheet_name(report)
        df.to_excel(writer, index=False, sheet_name=name)
        ws = writer.sheets[name]
        for idx, width in enumerate(COLUMN_WIDTHS):
            ws.column_dimensions[chr(ord("A") + idx)].width = width

    return output.getvalue()


def write_summary_csv(report: SalaryReport) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=SUMMARY_COLUMNS)
    writer.writeheader()
    for row in summary_records(report.summary):
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")
