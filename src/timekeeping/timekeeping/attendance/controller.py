from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_bounds, parse_iso_date
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _parse_range() -> tuple[date, date]:
        """startDate/endDate query params; defaults to the current month."""
        today = date.today()
        default_start, default_end = month_bounds(today.year, today.month)
        start_s = request.args.get("startDate")
        end_s = request.args.get("endDate")
        start = parse_iso_date(start_s) if start_s else default_start
        end = parse_iso_date(end_s) if end_s else default_end
        return start, end

    @app.route("/api/timekeeping/employee/<int:employee_id>", methods=["GET"], endpoint="employee_timekeeping")
    def employee_timekeeping(employee_id: int):
        try:
            start, end = _parse_range()
            rows = container.attendance_service.get_employee_history(employee_id, start=start, end=end)
            return jsonify({"success": True, "data": [r.to_dict() for r in rows]}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Failed to load timekeeping for employee %s", employee_id)
            return jsonify({"success": False, "message": "Không thể tải dữ liệu chấm công"}), 500

    @app.route("/api/timekeeping/department/<int:department_id>", methods=["GET"], endpoint="department_timekeeping")
    def department_timekeeping(department_id: int):
        try:
            start, end = _parse_range()
            rows = container.attendance_service.get_department_records(department_id, start=start, end=end)
            return jsonify({"success": True, "data": [r.to_dict() for r in rows]}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Failed to load timekeeping for department %s", department_id)
            return jsonify({"success": False, "message": "Lỗi khi tải dữ liệu chấm công"}), 500
