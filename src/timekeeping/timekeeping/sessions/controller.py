from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.enums import ScanType
from ..core.exceptions import AlreadyActiveError, ValidationError
from ..container import Container
from .model import ScanEvent

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _session_payload(employee_id: int) -> dict:
        tracker = container.session_registry.get(employee_id)
        session = tracker.session
        elapsed = tracker.elapsed()
        return {
            "state": tracker.state.value,
            "startedAt": session.started_at.isoformat() if session else None,
            "elapsed": str(elapsed) if elapsed else None,
        }

    @app.route("/api/sessions/<int:employee_id>/scan", methods=["POST"], endpoint="session_scan")
    def session_scan(employee_id: int):
        """Scan notification from the device after the QR check-in/out succeeded."""
        try:
            event = ScanEvent.from_payload(request.get_json(silent=True) or {})
            container.session_registry.get(employee_id).handle_scan(event)
            message = "Điểm danh vào thành công!" if event.scan_type == ScanType.CHECKIN else "Điểm danh ra thành công!"
            return jsonify({"success": True, "message": message, "data": _session_payload(employee_id)}), 200
        except AlreadyActiveError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Scan handling failed for employee %s", employee_id)
            return jsonify({"success": False, "message": "Có lỗi xảy ra khi điểm danh"}), 500

    @app.route("/api/sessions/<int:employee_id>/elapsed", methods=["GET"], endpoint="session_elapsed")
    def session_elapsed(employee_id: int):
        return jsonify({"success": True, "data": _session_payload(employee_id)}), 200

    @app.route("/api/sessions/<int:employee_id>/cancel", methods=["POST"], endpoint="session_cancel")
    def session_cancel(employee_id: int):
        container.session_registry.get(employee_id).end_session()
        return jsonify({"success": True, "data": _session_payload(employee_id)}), 200
