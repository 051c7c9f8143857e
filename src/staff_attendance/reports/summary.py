from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..attendance.model import EntryState
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class DaySummary:
    present: int = 0
    absent: int = 0
    training: int = 0
    half_day: int = 0
    holiday: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            AttendanceStatus.PRESENT.value: self.present,
            AttendanceStatus.ABSENT.value: self.absent,
            AttendanceStatus.TRAINING.value: self.training,
            AttendanceStatus.HALF_DAY.value: self.half_day,
            AttendanceStatus.HOLIDAY.value: self.holiday,
        }

    @property
    def total(self) -> int:
        return self.present + self.absent + self.training + self.half_day + self.holiday

    def compact(self) -> str:
        """Packed form used in report summary rows."""
        return (
            f"P:{self.present} | A:{self.absent} | T:{self.training} "
            f"| H:{self.half_day} | Ho:{self.holiday}"
        )

    def long(self) -> str:
        return " | ".join(f"{label}: {count}" for label, count in self.as_dict().items())


_FIELDS = {
    AttendanceStatus.PRESENT: "present",
    AttendanceStatus.ABSENT: "absent",
    AttendanceStatus.TRAINING: "training",
    AttendanceStatus.HALF_DAY: "half_day",
    AttendanceStatus.HOLIDAY: "holiday",
}


def summarize(day_map: Mapping[str, EntryState]) -> DaySummary:
    counts = dict.fromkeys(_FIELDS.values(), 0)
    for state in day_map.values():
        field = _FIELDS.get(state.status)
        if field:
            counts[field] += 1
    return DaySummary(**counts)
