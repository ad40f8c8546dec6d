from __future__ import annotations

from datetime import timedelta

from flask import Flask, session

from ..common.auth import admin_required, current_actor, login_required
from ..common.http import json_endpoint, ok, request_data
from ..container import Container


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in {"1", "true", "yes", "on"}


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=7)

    @app.route("/login", methods=["POST"], endpoint="login")
    @json_endpoint
    def login():
        data = request_data()
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.clear()
        session.permanent = _as_bool(data.get("remember_me"))
        actor = s_user.to_actor()
        session["user_id"] = actor.user_id
        session["role"] = actor.role.value
        session["name"] = s_user.full_name

        return ok({"user_id": s_user.user_id, "full_name": s_user.full_name, "role": s_user.role})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok()

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    @json_endpoint
    def me():
        return ok(container.account_service.get_own_profile(current_actor()))

    @app.route("/me/password", methods=["POST"], endpoint="me_password")
    @admin_required
    @json_endpoint
    def me_password():
        data = request_data()
        container.account_service.update_own_password(
            current_actor(),
            new_password=data.get("new_password", ""),
            confirm_password=data.get("confirm_password", ""),
        )
        return ok()

    @app.route("/admin/accounts", methods=["GET"], endpoint="admin_accounts")
    @admin_required
    @json_endpoint
    def admin_accounts():
        return ok(container.account_service.list_accounts(current_actor()))

    @app.route("/admin/accounts", methods=["POST"], endpoint="admin_accounts_create")
    @admin_required
    @json_endpoint
    def admin_accounts_create():
        data = request_data()
        user_id = container.account_service.create_employee_account(
            current_actor(),
            email=data.get("email", ""),
            password=data.get("password", ""),
            full_name=data.get("full_name", ""),
            employee_number=data.get("employee_number", ""),
        )
        return ok({"user_id": user_id}, 201)

    @app.route("/admin/accounts/<int:user_id>/status", methods=["POST"], endpoint="admin_accounts_status")
    @admin_required
    @json_endpoint
    def admin_accounts_status(user_id: int):
        data = request_data()
        container.account_service.set_active(current_actor(), user_id=user_id, is_active=_as_bool(data.get("is_active")))
        return ok()

    @app.route("/admin/accounts/<int:user_id>/password", methods=["POST"], endpoint="admin_accounts_password")
    @admin_required
    @json_endpoint
    def admin_accounts_password(user_id: int):
        data = request_data()
        container.account_service.reset_password(current_actor(), user_id=user_id, new_password=data.get("new_password", ""))
        return ok()

    @app.route("/admin/accounts/<int:user_id>/delete", methods=["POST"], endpoint="admin_accounts_delete")
    @admin_required
    @json_endpoint
    def admin_accounts_delete(user_id: int):
        container.account_service.delete_account(current_actor(), user_id=user_id)
        return ok()
