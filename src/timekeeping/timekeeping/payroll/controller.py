from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_month
from ..core.exceptions import ValidationError
from ..container import Container
from .export import XLSX_MIMETYPE, summary_filename, write_summary_csv, write_summary_xlsx
from .model import SalaryReport

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _build_report(department_id: int) -> SalaryReport:
        month_s = request.args.get("month")
        if month_s:
            year, month = parse_month(month_s)
        else:
            today = date.today()
            year, month = today.year, today.month
        return container.payroll_report_service.build_monthly_summary(
            department_id=department_id,
            year=year,
            month=month,
        )

    def _attachment(payload: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            payload,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/payroll/department/<int:department_id>/summary", methods=["GET"], endpoint="salary_summary")
    def salary_summary(department_id: int):
        try:
            report = _build_report(department_id)
            return jsonify(
                {
                    "success": True,
                    "period": report.period_label,
                    "startDate": report.start.strftime("%Y-%m-%d"),
                    "endDate": report.end.strftime("%Y-%m-%d"),
                    "data": [s.to_dict() for s in report.summary],
                }
            ), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Failed to build salary summary for department %s", department_id)
            return jsonify({"success": False, "message": "Lỗi khi tải dữ liệu lương"}), 500

    @app.route("/api/payroll/department/<int:department_id>/summary.xlsx", methods=["GET"], endpoint="salary_summary_xlsx")
    def salary_summary_xlsx(department_id: int):
        try:
            report = _build_report(department_id)
            return _attachment(write_summary_xlsx(report), mimetype=XLSX_MIMETYPE, filename=summary_filename(report))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Failed to export salary summary for department %s", department_id)
            return jsonify({"success": False, "message": "Lỗi khi xuất file Excel"}), 500

    @app.route("/api/payroll/department/<int:department_id>/summary.csv", methods=["GET"], endpoint="salary_summary_csv")
    def salary_summary_csv(department_id: int):
        try:
            report = _build_report(department_id)
            filename = summary_filename(report, extension="csv")
            return _attachment(write_summary_csv(report), mimetype="text/csv", filename=filename)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Failed to export salary summary for department %s", department_id)
            return jsonify({"success": False, "message": "Lỗi khi xuất file CSV"}), 500
