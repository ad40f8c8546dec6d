from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import first_day_of_month, now_local
from ..core.constants import OVERVIEW_RECENT_LIMIT, RECENT_CHECKINS_LIMIT
from ..core.context import Actor, require_admin
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import AttendanceLog, Overview
from .repository import CheckInRepository

logger = logging.getLogger(__name__)

ALREADY_CHECKED_IN = "Attendance was already recorded today"


class CheckInService:
    """Self-service check-in for employees plus the admin views over the log."""

    def __init__(self, logs: CheckInRepository, users: UserRepository, *, recent_limit: int = RECENT_CHECKINS_LIMIT):
        self._logs = logs
        self._users = users
        self._recent_limit = int(recent_limit)

    def check_in(
        self,
        actor: Actor,
        *,
        now: Optional[datetime] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> int:
        now = now or now_local()
        today = now.date()

        profile = self._users.get_by_id(actor.user_id)
        if not profile:
            raise NotFoundError("Profile does not exist")
        if not profile.is_active:
            raise ValidationError("This account is disabled")

        if self._logs.get_for_user_and_date(actor.user_id, today):
            raise ValidationError(ALREADY_CHECKED_IN)

        try:
            log_id = self._logs.create(
                user_id=actor.user_id,
                employee_number=profile.employee_number or "",
                full_name=profile.full_name,
                check_in_time=now,
                log_date=today,
                ip_address=ip_address,
                user_agent=(user_agent or "")[:512] or None,
            )
        except ConflictError:
            # A concurrent request won; the unique (user, date) key rejected this one.
            raise ValidationError(ALREADY_CHECKED_IN)

        logger.info("user %s checked in on %s", actor.user_id, today)
        return log_id

    def today_for_self(self, actor: Actor, *, today: Optional[date] = None) -> Optional[AttendanceLog]:
        return self._logs.get_for_user_and_date(actor.user_id, today or now_local().date())

    def recent_for_self(self, actor: Actor) -> Sequence[AttendanceLog]:
        return self._logs.list_logs(user_id=actor.user_id, limit=self._recent_limit)

    def list_logs(
        self,
        actor: Actor,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        user_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> Sequence[AttendanceLog]:
        require_admin(actor)
        if start_date and end_date and end_date < start_date:
            raise ValidationError("End date must be on or after the start date")

        logs = self._logs.list_logs(start_date=start_date, end_date=end_date, user_id=user_id)
        term = (search or "").strip().lower()
        if not term:
            return logs
        return [l for l in logs if term in l.full_name.lower() or term in (l.employee_number or "").lower()]

    def overview(self, actor: Actor, *, today: Optional[date] = None) -> Overview:
        require_admin(actor)
        today = today or now_local().date()

        accounts = self._users.list_accounts()
        return Overview(
            total_accounts=len(accounts),
            active_accounts=sum(1 for a in accounts if a.is_active),
            today_checkins=len(self._logs.list_logs(start_date=today, end_date=today)),
            month_checkins=len(self._logs.list_logs(start_date=first_day_of_month(today))),
            recent=list(self._logs.list_logs(limit=OVERVIEW_RECENT_LIMIT)),
        )
