from __future__ import annotations

from datetime import date

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_past_or_today(value: str, *, today: date) -> str:
    """Validate an ISO date string that must not be in the future; returns it normalised."""
    if not value or not value.strip():
        raise ValidationError("Select a date first!")
    parsed = parse_iso_date(value.strip())
    if parsed > today:
        raise ValidationError("Cannot select a future date!")
    return parsed.isoformat()


def parse_status(value: str | AttendanceStatus | None) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(value or "")
    except ValueError:
        raise ValidationError(f"Unknown status: {value!r}") from None
