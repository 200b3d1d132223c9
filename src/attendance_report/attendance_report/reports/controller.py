from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import parse_flag
from ..container import Container
from ..core.constants import ALL_AREAS
from ..core.exceptions import DataUnavailableError, ValidationError
from .model import ReportFilters

logger = logging.getLogger(__name__)

DETAIL_FIELDS = [
    "work_date",
    "employee_id",
    "employee_name",
    "area",
    "punch",
    "late_minutes",
    "status",
    "status_label",
    "is_holiday",
]


def register(app: Flask, container: Container) -> None:
    def _filters_from_request() -> ReportFilters:
        args = request.args
        month = (args.get("month") or "").strip() or None
        return ReportFilters(
            month=month,
            area=(args.get("area") or ALL_AREAS).strip() or ALL_AREAS,
            name_query=args.get("q", ""),
            late_only=parse_flag(args.get("late_only")),
        )

    def _today_from_request():
        value = request.args.get("today")
        return parse_iso_date(value) if value else None

    def _write_report_csv(*, data, filename: str):
        """Write detail rows to a CSV download."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=DETAIL_FIELDS)
        writer.writeheader()
        for row in data.details:
            writer.writerow(row.to_dict())

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.errorhandler(ValidationError)
    def _handle_validation(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(DataUnavailableError)
    def _handle_unavailable(e: DataUnavailableError):
        return jsonify({"success": False, "message": str(e), "failed": list(e.failed)}), 503

    @app.route("/api/periods", methods=["GET"], endpoint="api_periods")
    def api_periods():
        svc = container.report_service
        dataset = svc.load()
        return jsonify(
            {
                "months": svc.available_months(dataset),
                "areas": svc.available_areas(dataset),
                "default_month": svc.default_month(dataset),
            }
        )

    @app.route("/api/report", methods=["GET"], endpoint="api_report")
    def api_report():
        report = container.report_service.build(_filters_from_request(), today=_today_from_request())
        return jsonify(report.to_dict())

    @app.route("/api/report.csv", methods=["GET"], endpoint="api_report_csv")
    def api_report_csv():
        report = container.report_service.build(_filters_from_request(), today=_today_from_request())
        return _write_report_csv(data=report, filename=f"attendance_{report.month}.csv")
