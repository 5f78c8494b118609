from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_positive_id
from ..container import Container
from ..core.enums import QuickAction
from ..core.exceptions import ValidationError
from .model import AttendanceRecord


def _iso(value):
    return value.isoformat() if value is not None else None


def record_to_json(r: AttendanceRecord) -> dict:
    return {
        "attendance_id": r.attendance_id,
        "staff_id": r.staff_id,
        "status": r.status.value,
        "clock_in_time": _iso(r.clock_in_time),
        "break_start_time": _iso(r.break_start_time),
        "break_end_time": _iso(r.break_end_time),
        "clock_out_time": _iso(r.clock_out_time),
        "scheduled_start_time": r.scheduled_start_time.strftime("%H:%M") if r.scheduled_start_time else None,
        "is_late": r.is_late,
        "late_minutes": r.late_minutes,
        "override_by": r.override_by,
        "override_pin_used": r.override_pin_used,
        "face_match_confidence": r.face_match_confidence,
        "notes": r.notes,
    }


def _clock_in_options(data: dict) -> dict:
    override_by = data.get("override_by")
    return {
        "face_confidence": data.get("face_confidence"),
        "override_by": require_positive_id(override_by, "override_by") if override_by is not None else None,
        "override_pin_used": bool(data.get("override_pin_used", False)),
        "scheduled_start": data.get("scheduled_start") or None,
        "shift_date": data.get("shift_date") or None,
        "notes": data.get("notes") or None,
    }


def _parse_action(raw: str) -> QuickAction:
    try:
        return QuickAction(raw.replace("-", "_").lower())
    except ValueError:
        raise ValidationError(f"Unknown action: {raw}")


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/clock-in", methods=["POST"], endpoint="api_clock_in")
    def api_clock_in():
        data = request.get_json(silent=True) or {}
        staff_id = require_positive_id(data.get("staff_id"), "staff_id")
        record = service.clock_in(staff_id, **_clock_in_options(data))
        return jsonify({"success": True, "record": record_to_json(record)}), 201

    @app.route("/api/attendance/<int:staff_id>/actions", methods=["GET"], endpoint="api_allowed_actions")
    def api_allowed_actions(staff_id: int):
        active = service.get_active_record(staff_id)
        actions = sorted(a.value for a in service.allowed_actions(staff_id))
        return jsonify(
            {
                "success": True,
                "staff_id": staff_id,
                "actions": actions,
                "record": record_to_json(active) if active else None,
            }
        )

    @app.route("/api/attendance/<int:staff_id>/<action>", methods=["POST"], endpoint="api_perform_action")
    def api_perform_action(staff_id: int, action: str):
        """Kiosk quick action: clock-in, start-break, end-break or clock-out."""
        data = request.get_json(silent=True) or {}
        quick_action = _parse_action(action)
        options = _clock_in_options(data) if quick_action == QuickAction.CLOCK_IN else {}
        record = service.perform_action(staff_id, quick_action, **options)
        return jsonify({"success": True, "record": record_to_json(record)})

    @app.route(
        "/api/attendance/records/<int:record_id>/break/start", methods=["POST"], endpoint="api_start_break"
    )
    def api_start_break(record_id: int):
        return jsonify({"success": True, "record": record_to_json(service.start_break(record_id))})

    @app.route("/api/attendance/records/<int:record_id>/break/end", methods=["POST"], endpoint="api_end_break")
    def api_end_break(record_id: int):
        return jsonify({"success": True, "record": record_to_json(service.end_break(record_id))})

    @app.route("/api/attendance/records/<int:record_id>/clock-out", methods=["POST"], endpoint="api_clock_out")
    def api_clock_out(record_id: int):
        return jsonify({"success": True, "record": record_to_json(service.clock_out(record_id))})
