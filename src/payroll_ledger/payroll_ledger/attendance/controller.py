from __future__ import annotations

from flask import Flask

from ..common.auth import admin_required, current_actor
from ..common.datetime_utils import now_local
from ..common.http import json_endpoint, ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.attendance_service

    @app.route("/attendance", methods=["POST"], endpoint="attendance_record")
    @admin_required
    @json_endpoint
    def attendance_record():
        data = request_data()
        record_id = svc.record_status(
            current_actor(),
            employee_id=data.get("employee_id"),
            work_date=data.get("date") or now_local().date(),
            status=data.get("status"),
        )
        return ok({"record_id": record_id})

    @app.route("/attendance/employee/<int:employee_id>", methods=["GET"], endpoint="attendance_for_employee")
    @admin_required
    @json_endpoint
    def attendance_for_employee(employee_id: int):
        rows = svc.list_for_employee(current_actor(), employee_id)
        return ok([svc.to_ui(r) for r in rows])

    @app.route("/attendance/<int:record_id>/delete", methods=["POST"], endpoint="attendance_delete")
    @admin_required
    @json_endpoint
    def attendance_delete(record_id: int):
        svc.delete(current_actor(), record_id=record_id)
        return ok()
