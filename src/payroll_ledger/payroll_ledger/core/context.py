from __future__ import annotations

from dataclasses import dataclass

from .enums import Role
from .exceptions import AuthorizationError


@dataclass(frozen=True)
class Actor:
    """Request-scoped identity passed explicitly into every service call."""

    user_id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def require_admin(actor: Actor) -> None:
    if not actor.is_admin:
        raise AuthorizationError("You do not have permission for this action")
