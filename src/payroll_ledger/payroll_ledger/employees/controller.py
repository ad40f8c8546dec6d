from __future__ import annotations

from flask import Flask, request

from ..common.auth import admin_required, current_actor
from ..common.http import json_endpoint, ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employees", methods=["GET"], endpoint="employees")
    @admin_required
    @json_endpoint
    def employees():
        return ok(container.employee_service.list_all(current_actor(), search=request.args.get("q")))

    @app.route("/employees", methods=["POST"], endpoint="employees_create")
    @admin_required
    @json_endpoint
    def employees_create():
        data = request_data()
        employee_id = container.employee_service.create(
            current_actor(),
            employee_number=data.get("employee_number", ""),
            name=data.get("name", ""),
        )
        return ok({"employee_id": employee_id}, 201)

    @app.route("/employees/<int:employee_id>", methods=["POST"], endpoint="employees_update")
    @admin_required
    @json_endpoint
    def employees_update(employee_id: int):
        # employee_number is immutable; only the name is taken from the form.
        container.employee_service.rename(current_actor(), employee_id=employee_id, name=request_data().get("name", ""))
        return ok()

    @app.route("/employees/<int:employee_id>/delete", methods=["POST"], endpoint="employees_delete")
    @admin_required
    @json_endpoint
    def employees_delete(employee_id: int):
        container.employee_service.delete(current_actor(), employee_id=employee_id)
        return ok()
