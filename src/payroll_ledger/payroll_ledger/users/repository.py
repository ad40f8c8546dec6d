from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import EmployeeAccount, UserProfile


class UserRepository(Protocol):
    """Repository interface for profiles and employee accounts.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[UserProfile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def find_admin(self) -> Optional[UserProfile]:
        raise NotImplementedError

    def create_profile(self, *, email: str, password_hash: str, full_name: str, role: Role) -> int:
        raise NotImplementedError

    def create_employee_account(
        self,
        *,
        email: str,
        password_hash: str,
        full_name: str,
        employee_number: str,
        created_by: int,
    ) -> int:
        """Create the profile and its employee account as one atomic write.

        Returns the new user_id.
        """

        raise NotImplementedError

    def set_active(self, user_id: int, *, is_active: bool) -> bool:
        """Flip the active flag on profile and account together."""

        raise NotImplementedError

    def update_password_hash(self, user_id: int, *, password_hash: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError

    def list_accounts(self) -> Sequence[EmployeeAccount]:
        """Newest first."""

        raise NotImplementedError
