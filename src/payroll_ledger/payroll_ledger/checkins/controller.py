from __future__ import annotations

import io

from flask import Flask, request, send_file

from ..common.auth import admin_required, current_actor, login_required
from ..common.datetime_utils import now_local
from ..common.http import json_endpoint, ok
from ..common.validators import parse_date_field
from ..container import Container
from ..reports.excel_export import XLSX_MIMETYPE, attendance_logs_workbook, export_filename


def _optional_date(name: str):
    value = request.args.get(name)
    return parse_date_field(value, name) if value else None


def _optional_int(name: str):
    value = request.args.get(name, "")
    return int(value) if value.isdigit() else None


def register(app: Flask, container: Container) -> None:
    def _filtered_logs():
        return container.checkin_service.list_logs(
            current_actor(),
            start_date=_optional_date("start"),
            end_date=_optional_date("end"),
            user_id=_optional_int("user_id"),
            search=request.args.get("q"),
        )

    @app.route("/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    @json_endpoint
    def checkin():
        log_id = container.checkin_service.check_in(
            current_actor(),
            ip_address=request.remote_addr,
            user_agent=request.headers.get("User-Agent"),
        )
        return ok({"log_id": log_id}, 201)

    @app.route("/me/checkins", methods=["GET"], endpoint="me_checkins")
    @login_required
    @json_endpoint
    def me_checkins():
        actor = current_actor()
        return ok(
            {
                "today": container.checkin_service.today_for_self(actor),
                "recent": container.checkin_service.recent_for_self(actor),
            }
        )

    @app.route("/admin/checkins", methods=["GET"], endpoint="admin_checkins")
    @admin_required
    @json_endpoint
    def admin_checkins():
        return ok(_filtered_logs())

    @app.route("/admin/checkins/export", methods=["GET"], endpoint="admin_checkins_export")
    @admin_required
    @json_endpoint
    def admin_checkins_export():
        content = attendance_logs_workbook(_filtered_logs())
        filename = export_filename("attendance_report", on=now_local().date())
        return send_file(io.BytesIO(content), mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=filename)

    @app.route("/admin/overview", methods=["GET"], endpoint="admin_overview")
    @admin_required
    @json_endpoint
    def admin_overview():
        return ok(container.checkin_service.overview(current_actor()))
