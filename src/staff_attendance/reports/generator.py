from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Sequence, Union

from ..attendance.ledger import AttendanceLedger
from ..attendance.model import EntryState
from ..core.constants import EMPTY_PLACEHOLDER, REPORT_FILE_PREFIX, SUMMARY_EMPLOYEE_LABEL
from ..core.enums import ReportMode
from ..core.exceptions import NoDataError
from .summary import DaySummary, summarize


@dataclass(frozen=True)
class Report:
    """Row set shared by spreadsheet export and print rendering."""

    mode: ReportMode
    anchor: date
    rows: list[list[str]]
    summaries: dict[str, DaySummary] = field(default_factory=dict)

    @property
    def basename(self) -> str:
        if self.mode == ReportMode.MONTHLY:
            return f"{REPORT_FILE_PREFIX}_{self.anchor.strftime('%Y-%m')}"
        if self.mode == ReportMode.YEARLY:
            return f"{REPORT_FILE_PREFIX}_{self.anchor.strftime('%Y')}"
        return f"{REPORT_FILE_PREFIX}_{self.anchor.isoformat()}"

    @property
    def dates(self) -> list[str]:
        return list(self.summaries)


def _in_window(day: str, mode: ReportMode, anchor: date) -> bool:
    if mode == ReportMode.DAILY:
        return day == anchor.isoformat()
    if mode == ReportMode.MONTHLY:
        return day[:7] == anchor.strftime("%Y-%m")
    return day[:4] == anchor.strftime("%Y")


def _ordered_names(day_map: Mapping[str, EntryState], roster: Sequence[str]) -> list[str]:
    names = [n for n in roster if n in day_map]
    names.extend(n for n in day_map if n not in names)
    return names


def generate(
    ledger: AttendanceLedger,
    mode: ReportMode,
    anchor: date,
    roster: Sequence[str] = (),
) -> Union[Report, NoDataError]:
    """Build the rows for one day, one month or one year of the ledger.

    An empty window is reported by returning a NoDataError instead of an
    empty report; callers decide whether to raise it.
    """
    mode = ReportMode(mode)
    days = ledger.snapshot()
    if not any(days.values()):
        return NoDataError("No attendance data available!")

    rows: list[list[str]] = []
    summaries: dict[str, DaySummary] = {}
    for day in sorted(d for d in days if _in_window(d, mode, anchor)):
        day_map = days[day]
        if not day_map:
            continue
        for name in _ordered_names(day_map, roster):
            state = day_map[name]
            status = getattr(state.status, "value", state.status)
            rows.append([day, name, status or EMPTY_PLACEHOLDER, state.reason or EMPTY_PLACEHOLDER])
        summary = summarize(day_map)
        summaries[day] = summary
        rows.append([day, SUMMARY_EMPLOYEE_LABEL, summary.compact(), EMPTY_PLACEHOLDER])

    if not rows:
        return NoDataError(f"No {mode.value} data found for selected date.")
    return Report(mode=mode, anchor=anchor, rows=rows, summaries=summaries)
