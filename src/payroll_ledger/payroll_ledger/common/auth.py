from __future__ import annotations

from functools import wraps

from flask import session

from ..core.context import Actor
from ..core.enums import Role
from .http import fail


def current_actor() -> Actor:
    """Build the request-scoped identity from the signed session cookie."""

    return Actor(user_id=int(session["user_id"]), role=Role(session["role"]))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Please sign in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Please sign in to continue", 401)
        if session.get("role") != Role.ADMIN.value:
            return fail("You do not have permission for this action", 403)
        return view(*args, **kwargs)

    return wrapper
