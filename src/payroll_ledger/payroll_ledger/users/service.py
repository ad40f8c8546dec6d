from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_id, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.context import Actor, require_admin
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from .model import EmployeeAccount, UserProfile
from .repository import UserRepository

logger = logging.getLogger(__name__)


def _normalize_email(email: Optional[str]) -> str:
    email = require_non_empty(email, "Email").lower()
    if "@" not in email:
        raise ValidationError("Email is not valid")
    return email


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    full_name: str
    role: Role
    employee_number: Optional[str]

    def to_actor(self) -> Actor:
        return Actor(user_id=self.user_id, role=self.role)


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        if not isinstance(email, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid email or password")

        user = self._users.get_by_email(email.strip().lower())
        if not user or not user.is_active:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        logger.info("user %s signed in as %s", user.user_id, user.role.value)
        return SessionUser(
            user_id=user.user_id,
            full_name=user.full_name,
            role=user.role,
            employee_number=user.employee_number,
        )


class AccountService:
    """Use case: manage login accounts (admin) and own profile (anyone)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get_own_profile(self, actor: Actor) -> UserProfile:
        user = self._users.get_by_id(actor.user_id)
        if not user:
            raise NotFoundError("Profile does not exist")
        return user

    def list_accounts(self, actor: Actor) -> Sequence[EmployeeAccount]:
        require_admin(actor)
        return self._users.list_accounts()

    def create_employee_account(
        self,
        actor: Actor,
        *,
        email: str,
        password: str,
        full_name: str,
        employee_number: str,
    ) -> int:
        require_admin(actor)
        email = _normalize_email(email)
        full_name = require_non_empty(full_name, "Full name")
        employee_number = require_non_empty(employee_number, "Employee number")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise ConflictError("Email is already registered")

        user_id = self._users.create_employee_account(
            email=email,
            password_hash=generate_password_hash(password),
            full_name=full_name,
            employee_number=employee_number,
            created_by=actor.user_id,
        )
        logger.info("user %s created employee account %s", actor.user_id, user_id)
        return user_id

    def _get_employee_account(self, user_id) -> UserProfile:
        user = self._users.get_by_id(require_id(user_id, "Account"))
        if not user:
            raise NotFoundError("Account does not exist")
        if user.role == Role.ADMIN:
            raise ValidationError("The admin account cannot be changed from here")
        return user

    def set_active(self, actor: Actor, *, user_id: int, is_active: bool) -> None:
        require_admin(actor)
        user = self._get_employee_account(user_id)
        if not self._users.set_active(user.user_id, is_active=bool(is_active)):
            raise NotFoundError("Account does not exist")
        logger.info("user %s set account %s active=%s", actor.user_id, user.user_id, bool(is_active))

    def reset_password(self, actor: Actor, *, user_id: int, new_password: str) -> None:
        require_admin(actor)
        user = self._get_employee_account(user_id)
        require_min_length(new_password, "Password", MIN_PASSWORD_LENGTH)
        if not self._users.update_password_hash(user.user_id, password_hash=generate_password_hash(new_password)):
            raise NotFoundError("Account does not exist")
        logger.info("user %s reset the password of account %s", actor.user_id, user.user_id)

    def delete_account(self, actor: Actor, *, user_id: int) -> None:
        require_admin(actor)
        user = self._get_employee_account(user_id)
        if not self._users.delete_by_id(user.user_id):
            raise NotFoundError("Account does not exist")
        logger.info("user %s deleted account %s", actor.user_id, user.user_id)

    def update_own_password(self, actor: Actor, *, new_password: str, confirm_password: str) -> None:
        require_admin(actor)
        if new_password != confirm_password:
            raise ValidationError("New passwords do not match")
        require_min_length(new_password, "Password", MIN_PASSWORD_LENGTH)
        if not self._users.update_password_hash(actor.user_id, password_hash=generate_password_hash(new_password)):
            raise NotFoundError("Profile does not exist")
        logger.info("user %s changed own password", actor.user_id)


class AdminProvisioner:
    """One-time creation of the admin identity.

    Only reachable from the operator script (scripts/create_admin.py); no
    HTTP route calls it and no credential is built in.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    def ensure_admin(self, *, email: str, password: str, full_name: str) -> tuple[int, bool]:
        """Return (admin user_id, created). Does nothing when an admin exists."""

        existing = self._users.find_admin()
        if existing:
            return existing.user_id, False

        email = _normalize_email(email)
        full_name = require_non_empty(full_name, "Full name")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        if self._users.get_by_email(email):
            raise ConflictError("Email is already registered")

        user_id = self._users.create_profile(
            email=email,
            password_hash=generate_password_hash(password),
            full_name=full_name,
            role=Role.ADMIN,
        )
        logger.info("admin account %s provisioned", user_id)
        return user_id, True
