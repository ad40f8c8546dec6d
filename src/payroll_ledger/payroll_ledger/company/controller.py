from __future__ import annotations

from flask import Flask

from ..common.auth import admin_required, current_actor
from ..common.http import json_endpoint, ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/settings/company", methods=["GET"], endpoint="company_info")
    @admin_required
    @json_endpoint
    def company_info():
        info = container.company_service.get_info()
        return ok({"place_name": info.place_name, "manager_name": info.manager_name, "saved": info.is_saved})

    @app.route("/settings/company", methods=["POST"], endpoint="company_save")
    @admin_required
    @json_endpoint
    def company_save():
        data = request_data()
        info = container.company_service.save_info(
            current_actor(),
            place_name=data.get("place_name", ""),
            manager_name=data.get("manager_name", ""),
        )
        return ok(info)

    @app.route("/settings/reset-month", methods=["POST"], endpoint="reset_month")
    @admin_required
    @json_endpoint
    def reset_month():
        return ok({"deleted": container.company_service.reset_month(current_actor())})
