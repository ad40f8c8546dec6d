"""Spreadsheet exports (xlsx) built with pandas + openpyxl."""

from __future__ import annotations

import io
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

import pandas as pd
from openpyxl.utils import get_column_letter

from ..checkins.model import AttendanceLog
from ..company.model import CompanyInfo
from ..payroll.model import EmployeeSummary

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

SUMMARY_SHEET = "Employee report"
LOGS_SHEET = "Attendance report"

LOG_COLUMNS = {
    "full_name": "Employee name",
    "employee_number": "Employee number",
    "date": "Date",
    "check_in": "Check-in time",
    "weekday": "Day",
}


def _days(value) -> float:
    return round(float(Decimal(value)), 2)


def _to_xlsx(df: pd.DataFrame, *, sheet_name: str, widths: Sequence[int], header: bool = True) -> bytes:
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, header=header, sheet_name=sheet_name)
        ws = writer.sheets[sheet_name]
        for idx, width in enumerate(widths, start=1):
            ws.column_dimensions[get_column_letter(idx)].width = width
    return out.getvalue()


def export_filename(prefix: str, *, on: date, suffix: Optional[str] = None) -> str:
    parts = [prefix]
    if suffix:
        parts.append("".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in suffix))
    parts.append(on.strftime("%Y-%m-%d"))
    return "_".join(parts) + ".xlsx"


def summary_rows(summary: EmployeeSummary, company: CompanyInfo, *, on: date) -> list[list]:
    """Two-column layout: company header, employee block, totals, report date."""

    return [
        ["Place name", company.place_name],
        ["Manager name", company.manager_name],
        [None, None],
        ["Employee report", None],
        ["Employee number", summary.employee.employee_number],
        ["Employee name", summary.employee.name],
        [None, None],
        ["Performance summary", None],
        ["Attendance days", summary.attendance_days],
        ["Absence days", summary.absence_days],
        ["Total advances", _days(summary.total_advances)],
        ["Total bonus days", _days(summary.total_bonus_days)],
        ["Total discount days", _days(summary.total_discount_days)],
        ["Net adjustment days", _days(summary.net_adjustment_days)],
        ["Total leave days", summary.total_leave_days],
        ["Total overtime days", _days(summary.total_overtime_days)],
        [None, None],
        ["Report date", on.strftime("%Y-%m-%d")],
    ]


def summary_workbook(summary: EmployeeSummary, company: CompanyInfo, *, on: date) -> bytes:
    df = pd.DataFrame(summary_rows(summary, company, on=on))
    return _to_xlsx(df, sheet_name=SUMMARY_SHEET, widths=(20, 30), header=False)


def log_rows(logs: Iterable[AttendanceLog]) -> list[dict]:
    return [
        {
            LOG_COLUMNS["full_name"]: log.full_name,
            LOG_COLUMNS["employee_number"]: log.employee_number,
            LOG_COLUMNS["date"]: log.log_date.strftime("%Y-%m-%d"),
            LOG_COLUMNS["check_in"]: log.check_in_time.strftime("%H:%M:%S"),
            LOG_COLUMNS["weekday"]: log.log_date.strftime("%A"),
        }
        for log in logs
    ]


def attendance_logs_workbook(logs: Iterable[AttendanceLog]) -> bytes:
    df = pd.DataFrame(log_rows(logs), columns=list(LOG_COLUMNS.values()))
    return _to_xlsx(df, sheet_name=LOGS_SHEET, widths=(20, 15, 15, 15, 15))
