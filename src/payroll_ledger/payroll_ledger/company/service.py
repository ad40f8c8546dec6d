from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_MANAGER_NAME, DEFAULT_PLACE_NAME
from ..core.context import Actor, require_admin
from .model import CompanyInfo
from .repository import CompanyRepository

logger = logging.getLogger(__name__)


class CompanyService:
    """Use case: company header info and the "start a new month" reset."""

    def __init__(
        self,
        company: CompanyRepository,
        *,
        default_place_name: str = DEFAULT_PLACE_NAME,
        default_manager_name: str = DEFAULT_MANAGER_NAME,
    ):
        self._company = company
        self._default_place_name = default_place_name
        self._default_manager_name = default_manager_name

    def get_info(self) -> CompanyInfo:
        """Saved info, or unsaved defaults when nothing was saved yet."""

        info = self._company.get()
        if info:
            return info
        return CompanyInfo(
            company_id=None,
            place_name=self._default_place_name,
            manager_name=self._default_manager_name,
        )

    def save_info(self, actor: Actor, *, place_name: str, manager_name: str) -> CompanyInfo:
        require_admin(actor)
        place_name = require_non_empty(place_name, "Place name")
        manager_name = require_non_empty(manager_name, "Manager name")

        company_id = self._company.save(place_name=place_name, manager_name=manager_name)
        logger.info("user %s saved company info", actor.user_id)
        return CompanyInfo(company_id=company_id, place_name=place_name, manager_name=manager_name)

    def reset_month(self, actor: Actor) -> dict[str, int]:
        """Wipe all monthly ledgers; employees and company info are kept."""

        require_admin(actor)
        deleted = self._company.reset_monthly_data()
        logger.warning("user %s reset monthly data: %s", actor.user_id, deleted)
        return deleted
