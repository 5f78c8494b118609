from __future__ import annotations

from dataclasses import asdict
from datetime import date, timedelta

from flask import Flask, Response, jsonify, request

from ..common.datetime_utils import business_today, parse_iso_date
from ..container import Container


def _period_from_request() -> tuple[date, date]:
    """?start=YYYY-MM-DD&end=YYYY-MM-DD, defaulting to the current Monday-Sunday week."""

    start_raw = request.args.get("start")
    end_raw = request.args.get("end")

    if start_raw:
        start = parse_iso_date(start_raw)
    else:
        today = business_today()
        start = today - timedelta(days=today.weekday())
    end = parse_iso_date(end_raw) if end_raw else start + timedelta(days=6)
    return start, end


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="api_payroll")
    def api_payroll():
        start, end = _period_from_request()
        summaries = container.payroll_service.build_summaries(start=start, end=end)
        return jsonify(
            {
                "success": True,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "summaries": [asdict(s) for s in summaries],
            }
        )

    @app.route("/api/payroll.csv", methods=["GET"], endpoint="api_payroll_csv")
    def api_payroll_csv():
        start, end = _period_from_request()
        body = container.payroll_service.export_csv(start=start, end=end)
        filename = f"payroll_{start.isoformat()}_{end.isoformat()}.csv"
        return Response(
            body,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/compliance", methods=["GET"], endpoint="api_compliance")
    def api_compliance():
        start, end = _period_from_request()
        warnings = container.compliance_service.warnings_for_range(start=start, end=end)
        return jsonify({"success": True, "warnings": [w.to_dict() for w in warnings]})
