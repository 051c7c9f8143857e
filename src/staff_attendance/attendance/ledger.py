from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ..core.enums import AttendanceStatus
from .model import AttendanceEntry, EntryState

DayMap = Mapping[str, EntryState]


class AttendanceLedger:
    """In-memory attendance, date-major then employee-minor.

    Mutations never edit a published map in place: each one builds the new
    maps and swaps them in, so `snapshot()` always returns a consistent view.
    """

    def __init__(self, days: Optional[Mapping[str, Mapping[str, EntryState]]] = None):
        self._days: dict[str, dict[str, EntryState]] = {d: dict(m) for d, m in (days or {}).items()}

    @classmethod
    def from_entries(cls, entries: Iterable[AttendanceEntry]) -> "AttendanceLedger":
        days: dict[str, dict[str, EntryState]] = {}
        for e in entries:
            days.setdefault(e.date, {})[e.employee] = EntryState(status=e.status, reason=e.reason or "")
        return cls(days)

    def snapshot(self) -> Mapping[str, Mapping[str, EntryState]]:
        return self._days

    def get(self, date: str, employee: str) -> Optional[EntryState]:
        return self._days.get(date, {}).get(employee)

    def day(self, date: str) -> DayMap:
        return self._days.get(date, {})

    def dates(self) -> list[str]:
        return list(self._days)

    def is_empty(self) -> bool:
        return not any(self._days.values())

    def entries(self) -> list[AttendanceEntry]:
        return [
            AttendanceEntry(date=d, employee=name, status=st.status, reason=st.reason)
            for d, day_map in self._days.items()
            for name, st in day_map.items()
        ]

    def set(
        self,
        date: str,
        employee: str,
        status: Optional[AttendanceStatus] = None,
        reason: Optional[str] = None,
    ) -> EntryState:
        prior = self.get(date, employee) or EntryState()
        new_status = prior.status if status is None else status
        new_reason = prior.reason if reason is None else reason
        if new_status == AttendanceStatus.PRESENT:
            new_reason = ""

        state = EntryState(status=new_status, reason=new_reason)
        day_map = dict(self._days.get(date, {}))
        day_map[employee] = state
        days = dict(self._days)
        days[date] = day_map
        self._days = days
        return state

    def remove_employee(self, name: str) -> None:
        self._days = {d: {k: v for k, v in m.items() if k != name} for d, m in self._days.items()}

    def rename_employee(self, old: str, new: str) -> None:
        if old == new:
            return
        days: dict[str, dict[str, EntryState]] = {}
        for d, m in self._days.items():
            day_map = {k: v for k, v in m.items() if k != old}
            if old in m:
                # moved entry wins over anything already under `new`
                day_map[new] = m[old]
            days[d] = day_map
        self._days = days
