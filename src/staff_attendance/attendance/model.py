from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class EntryState:
    """Status and reason held by the ledger for one (date, employee) pair."""

    status: AttendanceStatus = AttendanceStatus.UNSET
    reason: str = ""


@dataclass(frozen=True)
class AttendanceEntry:
    """Record store row: one attendance entry."""

    date: str
    employee: str
    status: AttendanceStatus
    reason: str = ""

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "employee": self.employee,
            "status": self.status.value,
            "reason": self.reason,
        }
