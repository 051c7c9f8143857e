from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status stored per (date, employee). Values match the wire format."""

    PRESENT = "Present"
    ABSENT = "Absent"
    TRAINING = "Training"
    HALF_DAY = "Half Day"
    HOLIDAY = "Holiday"
    UNSET = ""

    @classmethod
    def recognised(cls) -> tuple["AttendanceStatus", ...]:
        return (cls.PRESENT, cls.ABSENT, cls.TRAINING, cls.HALF_DAY, cls.HOLIDAY)

    @property
    def needs_reason(self) -> bool:
        return self not in (AttendanceStatus.PRESENT, AttendanceStatus.UNSET)


class ReportMode(str, Enum):
    """Window selected for a report."""

    DAILY = "daily"
    MONTHLY = "monthly"
    YEARLY = "yearly"
