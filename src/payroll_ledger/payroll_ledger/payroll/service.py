from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import Iterable, Optional

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_id
from ..core.constants import SUMMARY_MAX_WORKERS
from ..core.context import Actor, require_admin
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..ledgers.model import Advance, Bonus, Discount, LeaveEntry, OvertimeEntry
from ..ledgers.repository import LedgerRepository
from .model import EmployeeSummary

logger = logging.getLogger(__name__)


def _sum(values: Iterable) -> Decimal:
    return sum((Decimal(v) for v in values), Decimal(0))


class EmployeeSummaryService:
    """Composes all ledgers of one employee into an EmployeeSummary.

    The six ledger reads are independent and read-only, so they run in
    parallel; the fold starts only once every read has finished. Any failed
    read fails the whole summary.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        advances: LedgerRepository[Advance],
        bonuses: LedgerRepository[Bonus],
        discounts: LedgerRepository[Discount],
        overtime: LedgerRepository[OvertimeEntry],
        leaves: LedgerRepository[LeaveEntry],
        *,
        max_workers: Optional[int] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._advances = advances
        self._bonuses = bonuses
        self._discounts = discounts
        self._overtime = overtime
        self._leaves = leaves
        self._max_workers = int(max_workers or SUMMARY_MAX_WORKERS)

    def build_summary(self, actor: Actor, employee_id: int) -> EmployeeSummary:
        require_admin(actor)
        employee_id = require_id(employee_id, "Employee")

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee does not exist")

        with ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="summary") as pool:
            futures = {
                "attendance": pool.submit(self._attendance.list_for_employee, employee_id),
                "advances": pool.submit(self._advances.list_for_employee, employee_id),
                "bonuses": pool.submit(self._bonuses.list_for_employee, employee_id),
                "discounts": pool.submit(self._discounts.list_for_employee, employee_id),
                "overtime": pool.submit(self._overtime.list_for_employee, employee_id),
                "leaves": pool.submit(self._leaves.list_for_employee, employee_id),
            }
            results = {name: list(f.result() or []) for name, f in futures.items()}

        attendance = results["attendance"]
        summary = EmployeeSummary(
            employee=employee,
            attendance_days=sum(1 for r in attendance if r.status == AttendanceStatus.PRESENT),
            absence_days=sum(1 for r in attendance if r.status == AttendanceStatus.ABSENT),
            total_advances=_sum(a.amount for a in results["advances"]),
            total_bonus_days=_sum(b.days for b in results["bonuses"]),
            total_discount_days=_sum(d.days for d in results["discounts"]),
            total_leave_days=sum(int(l.calculated_days) for l in results["leaves"]),
            total_overtime_days=_sum(o.calculated_days for o in results["overtime"]),
        )
        logger.debug("summary built for employee %s", employee_id)
        return summary
