from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from .model import NoShowRecord


def no_show_to_json(r: NoShowRecord) -> dict:
    return {
        "no_show_id": r.no_show_id,
        "staff_id": r.staff_id,
        "shift_id": r.shift_id,
        "shift_date": r.shift_date.isoformat(),
        "scheduled_start_time": r.scheduled_start_time.strftime("%H:%M"),
        "detected_at": r.detected_at.isoformat(),
        "resolved": r.resolved,
        "resolved_by": r.resolved_by,
        "resolved_at": r.resolved_at.isoformat() if r.resolved_at else None,
        "resolution_notes": r.resolution_notes,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/no-shows/scan", methods=["POST"], endpoint="api_scan_no_shows")
    def api_scan_no_shows():
        # Returns an empty list when the background scan is mid-run
        created = container.no_show_scanner.scan()
        return jsonify({"success": True, "created": [no_show_to_json(r) for r in created]})

    @app.route("/api/no-shows", methods=["GET"], endpoint="api_list_no_shows")
    def api_list_no_shows():
        raw = request.args.get("date")
        shift_date = parse_iso_date(raw) if raw else None
        records = container.no_show_service.list_unresolved(shift_date=shift_date)
        return jsonify({"success": True, "no_shows": [no_show_to_json(r) for r in records]})

    @app.route("/api/no-shows/<int:no_show_id>/resolve", methods=["POST"], endpoint="api_resolve_no_show")
    def api_resolve_no_show(no_show_id: int):
        data = request.get_json(silent=True) or {}
        container.no_show_service.resolve(
            no_show_id=no_show_id,
            resolved_by=data.get("resolved_by"),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "message": "No-show resolved"})
