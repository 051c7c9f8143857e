from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def list_attendance(self) -> Sequence[AttendanceEntry]:
        raise NotImplementedError

    def save_attendance(self, entry: AttendanceEntry) -> None:
        """Upsert: overwrites any stored entry for (entry.date, entry.employee)."""

        raise NotImplementedError
