from __future__ import annotations

from flask import jsonify, session

from ..core.constants import SESSION_TOKEN_KEY
from ..core.exceptions import (
    ConflictError,
    DomainError,
    DuplicateNameError,
    NoDataError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


def current_session(container):
    """Return the AttendanceSession bound to this browser, fetching data on first use."""
    token, store = container.sessions.get(session.get(SESSION_TOKEN_KEY))
    session[SESSION_TOKEN_KEY] = token
    if not store.loaded:
        store.reload()
    return store


def error_status(e: DomainError) -> int:
    if isinstance(e, (DuplicateNameError, ConflictError)):
        return 409
    if isinstance(e, (NotFoundError, NoDataError)):
        return 404
    if isinstance(e, ValidationError):
        return 400
    if isinstance(e, PersistenceError):
        return 502
    return 400


def json_error(e: DomainError):
    return jsonify({"success": False, "message": str(e)}), error_status(e)


def flash_category(e: DomainError) -> str:
    return "danger" if isinstance(e, PersistenceError) else "warning"
