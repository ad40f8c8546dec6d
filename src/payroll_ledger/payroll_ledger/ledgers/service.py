from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Generic, Optional, Sequence, TypeVar

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, parse_date_field, parse_non_negative, require_id, require_non_empty
from ..core.constants import MAX_AMOUNT, MAX_DAYS, MAX_HOURS, MONEY_PLACES
from ..core.context import Actor, require_admin
from ..core.enums import LedgerKind
from ..core.exceptions import NotFoundError, ValidationError
from ..payroll.calculator.base import LeaveDayCalculator, OvertimeCalculator
from ..payroll.calculator.standard_calculator import InclusiveDayCalculator, StandardOvertimeCalculator
from .model import Advance, Bonus, Discount, LeaveEntry, LedgerRow, OvertimeEntry
from .repository import LedgerRepository

logger = logging.getLogger(__name__)

E = TypeVar("E")


class LedgerService(Generic[E]):
    """Operations shared by every adjustment ledger.

    Subclasses validate and build the entity; nothing is written until the
    whole input has been validated.
    """

    kind: LedgerKind

    def __init__(self, repo: LedgerRepository[E], *, today: Optional[Callable[[], date]] = None):
        self._repo = repo
        self._today = today or (lambda: now_local().date())

    def list_all(self, actor: Actor) -> Sequence[LedgerRow[E]]:
        require_admin(actor)
        return self._repo.list_all()

    def list_for_employee(self, actor: Actor, employee_id: int) -> Sequence[E]:
        require_admin(actor)
        return self._repo.list_for_employee(require_id(employee_id, "Employee"))

    def delete(self, actor: Actor, *, entry_id: int) -> None:
        require_admin(actor)
        if not self._repo.delete(entry_id=require_id(entry_id, "Entry")):
            raise NotFoundError("Entry does not exist")
        logger.info("user %s deleted %s entry %s", actor.user_id, self.kind.value, entry_id)

    def _insert(self, actor: Actor, entry: E) -> int:
        entry_id = self._repo.create(entry)
        logger.info(
            "user %s added %s entry %s for employee %s",
            actor.user_id, self.kind.value, entry_id, getattr(entry, "employee_id"),
        )
        return entry_id

    def _replace(self, actor: Actor, entry: E) -> None:
        if not self._repo.update(entry):
            raise NotFoundError("Entry does not exist")
        logger.info("user %s updated %s entry %s", actor.user_id, self.kind.value, getattr(entry, "entry_id"))

    def _entry_date(self, value) -> date:
        if value is None or value == "":
            return self._today()
        return parse_date_field(value, "Date")


class AdvanceService(LedgerService[Advance]):
    kind = LedgerKind.ADVANCES

    def _build(self, *, entry_id: int, employee_id, amount, entry_date: date) -> Advance:
        return Advance(
            entry_id=entry_id,
            employee_id=require_id(employee_id, "Employee"),
            amount=parse_non_negative(amount, "Amount", places=MONEY_PLACES, max_value=MAX_AMOUNT),
            entry_date=entry_date,
        )

    def create(self, actor: Actor, *, employee_id, amount, entry_date=None) -> int:
        require_admin(actor)
        return self._insert(
            actor, self._build(entry_id=0, employee_id=employee_id, amount=amount, entry_date=self._entry_date(entry_date))
        )

    def update(self, actor: Actor, *, entry_id, employee_id, amount) -> None:
        require_admin(actor)
        entry = self._build(
            entry_id=require_id(entry_id, "Entry"), employee_id=employee_id, amount=amount, entry_date=self._today()
        )
        self._replace(actor, entry)


class DayAdjustmentService(LedgerService):
    """Bonuses and discounts: days magnitude plus a required reason."""

    def __init__(self, repo: LedgerRepository, *, kind: LedgerKind, today: Optional[Callable[[], date]] = None):
        if kind not in (LedgerKind.BONUSES, LedgerKind.DISCOUNTS):
            raise ValueError(f"Not a day adjustment ledger: {kind}")
        super().__init__(repo, today=today)
        self.kind = kind
        self._entity = Bonus if kind == LedgerKind.BONUSES else Discount

    def _build(self, *, entry_id: int, employee_id, days, reason, entry_date: date):
        return self._entity(
            entry_id=entry_id,
            employee_id=require_id(employee_id, "Employee"),
            days=parse_non_negative(days, "Days", places=MONEY_PLACES, max_value=MAX_DAYS),
            reason=require_non_empty(reason, "Reason"),
            entry_date=entry_date,
        )

    def create(self, actor: Actor, *, employee_id, days, reason, entry_date=None) -> int:
        require_admin(actor)
        entry = self._build(
            entry_id=0, employee_id=employee_id, days=days, reason=reason, entry_date=self._entry_date(entry_date)
        )
        return self._insert(actor, entry)

    def update(self, actor: Actor, *, entry_id, employee_id, days, reason) -> None:
        require_admin(actor)
        entry = self._build(
            entry_id=require_id(entry_id, "Entry"),
            employee_id=employee_id,
            days=days,
            reason=reason,
            entry_date=self._today(),
        )
        self._replace(actor, entry)


class OvertimeService(LedgerService[OvertimeEntry]):
    kind = LedgerKind.OVERTIME

    def __init__(
        self,
        repo: LedgerRepository[OvertimeEntry],
        *,
        calculator: Optional[OvertimeCalculator] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        super().__init__(repo, today=today)
        self._calculator = calculator or StandardOvertimeCalculator()

    def _build(self, *, entry_id: int, employee_id, hours, notes, entry_date: date) -> OvertimeEntry:
        parsed_hours = parse_non_negative(hours, "Hours", places=MONEY_PLACES, max_value=MAX_HOURS)
        return OvertimeEntry(
            entry_id=entry_id,
            employee_id=require_id(employee_id, "Employee"),
            hours=parsed_hours,
            calculated_days=self._calculator.days_for_hours(parsed_hours),
            notes=optional_text(notes, "Notes"),
            entry_date=entry_date,
        )

    def create(self, actor: Actor, *, employee_id, hours, notes=None, entry_date=None) -> int:
        require_admin(actor)
        entry = self._build(
            entry_id=0, employee_id=employee_id, hours=hours, notes=notes, entry_date=self._entry_date(entry_date)
        )
        return self._insert(actor, entry)

    def update(self, actor: Actor, *, entry_id, employee_id, hours, notes=None) -> None:
        require_admin(actor)
        entry = self._build(
            entry_id=require_id(entry_id, "Entry"),
            employee_id=employee_id,
            hours=hours,
            notes=notes,
            entry_date=self._today(),
        )
        self._replace(actor, entry)


class LeaveService(LedgerService[LeaveEntry]):
    kind = LedgerKind.LEAVES

    def __init__(
        self,
        repo: LedgerRepository[LeaveEntry],
        *,
        calculator: Optional[LeaveDayCalculator] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        super().__init__(repo, today=today)
        self._calculator = calculator or InclusiveDayCalculator()

    def _build(self, *, entry_id: int, employee_id, start_date, end_date, reason) -> LeaveEntry:
        employee_id = require_id(employee_id, "Employee")
        start = parse_date_field(start_date, "Start date")
        end = parse_date_field(end_date, "End date")
        reason = require_non_empty(reason, "Reason")
        if end < start:
            raise ValidationError("End date must be on or after the start date")

        return LeaveEntry(
            entry_id=entry_id,
            employee_id=employee_id,
            start_date=start,
            end_date=end,
            reason=reason,
            calculated_days=self._calculator.days_between(start, end),
            day_rule_version=self._calculator.version,
        )

    def create(self, actor: Actor, *, employee_id, start_date, end_date, reason) -> int:
        require_admin(actor)
        entry = self._build(entry_id=0, employee_id=employee_id, start_date=start_date, end_date=end_date, reason=reason)
        return self._insert(actor, entry)

    def update(self, actor: Actor, *, entry_id, employee_id, start_date, end_date, reason) -> None:
        require_admin(actor)
        entry = self._build(
            entry_id=require_id(entry_id, "Entry"),
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
        )
        self._replace(actor, entry)
