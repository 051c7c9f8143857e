from __future__ import annotations

from datetime import date
from typing import Callable

from ..common.datetime_utils import today_local
from ..common.validators import parse_status, require_non_empty, require_past_or_today
from ..core.enums import AttendanceStatus
from .model import AttendanceEntry
from .repository import AttendanceRepository


class AttendanceService:
    """Use case: read and upsert attendance entries through the record store API."""

    def __init__(self, attendance: AttendanceRepository, *, today: Callable[[], date] = today_local):
        self._attendance = attendance
        self._today = today

    def list_attendance(self) -> list[AttendanceEntry]:
        return list(self._attendance.list_attendance())

    def save_attendance(self, payload: dict) -> AttendanceEntry:
        status = parse_status(payload.get("status"))
        reason = "" if status == AttendanceStatus.PRESENT else str(payload.get("reason") or "")
        entry = AttendanceEntry(
            date=require_past_or_today(str(payload.get("date") or ""), today=self._today()),
            employee=require_non_empty(str(payload.get("employee") or ""), "Employee"),
            status=status,
            reason=reason,
        )
        self._attendance.save_attendance(entry)
        return entry
