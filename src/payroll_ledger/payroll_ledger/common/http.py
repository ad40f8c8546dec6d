from __future__ import annotations

import logging
from functools import wraps

from flask import current_app, jsonify, request

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .serialization import as_payload

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
)

GENERIC_FAILURE = "The operation failed, please try again"


def status_for(exc: DomainError) -> int:
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(exc, cls):
            return status
    return 400


def ok(data=None, status: int = 200):
    return jsonify({"success": True, "data": as_payload(data)}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def request_data() -> dict:
    """JSON body, or form fields for classic form posts."""

    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def json_endpoint(view):
    """Map domain errors to HTTP statuses; anything else is a generic 500.

    Every failure is scoped to this request; nothing is retried.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return fail(str(e), status_for(e))
        except Exception as e:
            logger.exception("unhandled error in %s", request.endpoint)
            if bool(current_app.config.get("DEBUG", False)):
                return fail(f"{GENERIC_FAILURE}: {e}", 500)
            return fail(GENERIC_FAILURE, 500)

    return wrapper
