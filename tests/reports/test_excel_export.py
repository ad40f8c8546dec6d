from __future__ import annotations

import io
from datetime import date, datetime
from decimal import Decimal

from openpyxl import load_workbook

from src.payroll_ledger.payroll_ledger.checkins.model import AttendanceLog
from src.payroll_ledger.payroll_ledger.company.model import CompanyInfo
from src.payroll_ledger.payroll_ledger.employees.model import Employee
from src.payroll_ledger.payroll_ledger.payroll.model import EmployeeSummary
from src.payroll_ledger.payroll_ledger.reports.excel_export import (
    LOG_COLUMNS,
    LOGS_SHEET,
    SUMMARY_SHEET,
    attendance_logs_workbook,
    export_filename,
    summary_workbook,
)


def _summary() -> EmployeeSummary:
    return EmployeeSummary(
        employee=Employee(employee_id=1, employee_number="E-1", name="Ana"),
        attendance_days=3,
        absence_days=2,
        total_advances=Decimal("150"),
        total_bonus_days=Decimal("2"),
        total_discount_days=Decimal("1"),
        total_leave_days=3,
        total_overtime_days=Decimal("0.5"),
    )


def test_summary_workbook_layout():
    content = summary_workbook(
        _summary(), CompanyInfo(company_id=1, place_name="Depot", manager_name="Rita"), on=date(2024, 2, 1)
    )

    ws = load_workbook(io.BytesIO(content))[SUMMARY_SHEET]
    values = {row[0]: row[1] for row in ws.iter_rows(values_only=True) if row[0]}
    assert values["Place name"] == "Depot"
    assert values["Employee number"] == "E-1"
    assert values["Attendance days"] == 3
    assert values["Total advances"] == 150
    assert values["Net adjustment days"] == 1
    assert values["Total overtime days"] == 0.5
    assert values["Report date"] == "2024-02-01"


def test_attendance_logs_workbook():
    log = AttendanceLog(
        log_id=1,
        user_id=2,
        employee_number="E-1",
        full_name="Ana",
        check_in_time=datetime(2024, 2, 1, 8, 5, 0),
        log_date=date(2024, 2, 1),
    )

    ws = load_workbook(io.BytesIO(attendance_logs_workbook([log])))[LOGS_SHEET]
    rows = list(ws.iter_rows(values_only=True))
    assert list(rows[0]) == list(LOG_COLUMNS.values())
    assert list(rows[1]) == ["Ana", "E-1", "2024-02-01", "08:05:00", "Thursday"]


def test_empty_log_export_has_header_only():
    ws = load_workbook(io.BytesIO(attendance_logs_workbook([])))[LOGS_SHEET]
    assert len(list(ws.iter_rows(values_only=True))) == 1


def test_export_filename_embeds_date():
    assert export_filename("attendance_report", on=date(2024, 2, 1)) == "attendance_report_2024-02-01.xlsx"
    assert export_filename("employee_report", on=date(2024, 2, 1), suffix="Ana M/1") == (
        "employee_report_Ana_M_1_2024-02-01.xlsx"
    )
