from __future__ import annotations

import io

from flask import Flask, send_file

from ..common.auth import admin_required, current_actor
from ..common.datetime_utils import now_local
from ..common.http import json_endpoint, ok
from ..container import Container
from ..reports.excel_export import XLSX_MIMETYPE, export_filename, summary_workbook


def register(app: Flask, container: Container) -> None:
    @app.route("/summary/<int:employee_id>", methods=["GET"], endpoint="summary")
    @admin_required
    @json_endpoint
    def summary(employee_id: int):
        result = container.summary_service.build_summary(current_actor(), employee_id)
        data = {
            "employee": result.employee,
            "attendance_days": result.attendance_days,
            "absence_days": result.absence_days,
            "total_advances": result.total_advances,
            "total_bonus_days": result.total_bonus_days,
            "total_discount_days": result.total_discount_days,
            "net_adjustment_days": result.net_adjustment_days,
            "total_leave_days": result.total_leave_days,
            "total_overtime_days": result.total_overtime_days,
        }
        return ok(data)

    @app.route("/summary/<int:employee_id>/export", methods=["GET"], endpoint="summary_export")
    @admin_required
    @json_endpoint
    def summary_export(employee_id: int):
        result = container.summary_service.build_summary(current_actor(), employee_id)
        today = now_local().date()
        content = summary_workbook(result, container.company_service.get_info(), on=today)
        filename = export_filename("employee_report", on=today, suffix=result.employee.name)
        return send_file(io.BytesIO(content), mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=filename)
