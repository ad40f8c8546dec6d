from __future__ import annotations

from dataclasses import asdict

from flask import Flask

from ..common.auth import admin_required, current_actor
from ..common.http import json_endpoint, ok, request_data
from ..container import Container
from ..core.enums import LedgerKind
from ..core.exceptions import NotFoundError
from .model import LedgerRow

# Form fields accepted per ledger, besides employee_id.
_FIELDS = {
    LedgerKind.ADVANCES: ("amount",),
    LedgerKind.BONUSES: ("days", "reason"),
    LedgerKind.DISCOUNTS: ("days", "reason"),
    LedgerKind.OVERTIME: ("hours", "notes"),
    LedgerKind.LEAVES: ("start_date", "end_date", "reason"),
}


def _kind(value: str) -> LedgerKind:
    try:
        return LedgerKind(value)
    except ValueError:
        raise NotFoundError("Unknown ledger")


def _row(row: LedgerRow) -> dict:
    data = asdict(row.entry)
    data["employee_number"] = row.employee_number
    data["employee_name"] = row.employee_name
    return data


def _fields(kind: LedgerKind) -> dict:
    data = request_data()
    fields = {name: data.get(name) for name in _FIELDS[kind]}
    fields["employee_id"] = data.get("employee_id")
    return fields


def register(app: Flask, container: Container) -> None:
    kinds = ", ".join(k.value for k in LedgerKind)

    @app.route(f"/ledgers/<any({kinds}):kind>", methods=["GET"], endpoint="ledger_list")
    @admin_required
    @json_endpoint
    def ledger_list(kind: str):
        svc = container.ledger_service(_kind(kind))
        return ok([_row(r) for r in svc.list_all(current_actor())])

    @app.route(f"/ledgers/<any({kinds}):kind>/employee/<int:employee_id>", methods=["GET"], endpoint="ledger_for_employee")
    @admin_required
    @json_endpoint
    def ledger_for_employee(kind: str, employee_id: int):
        svc = container.ledger_service(_kind(kind))
        return ok(svc.list_for_employee(current_actor(), employee_id))

    @app.route(f"/ledgers/<any({kinds}):kind>", methods=["POST"], endpoint="ledger_create")
    @admin_required
    @json_endpoint
    def ledger_create(kind: str):
        ledger = _kind(kind)
        entry_id = container.ledger_service(ledger).create(current_actor(), **_fields(ledger))
        return ok({"entry_id": entry_id}, 201)

    @app.route(f"/ledgers/<any({kinds}):kind>/<int:entry_id>", methods=["POST"], endpoint="ledger_update")
    @admin_required
    @json_endpoint
    def ledger_update(kind: str, entry_id: int):
        ledger = _kind(kind)
        container.ledger_service(ledger).update(current_actor(), entry_id=entry_id, **_fields(ledger))
        return ok()

    @app.route(f"/ledgers/<any({kinds}):kind>/<int:entry_id>/delete", methods=["POST"], endpoint="ledger_delete")
    @admin_required
    @json_endpoint
    def ledger_delete(kind: str, entry_id: int):
        container.ledger_service(_kind(kind)).delete(current_actor(), entry_id=entry_id)
        return ok()
