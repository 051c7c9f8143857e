from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.validators import parse_status, require_past_or_today
from ..core.constants import DEFAULT_MAX_SESSIONS
from ..core.enums import AttendanceStatus, ReportMode
from ..core.exceptions import DomainError, NoDataError, NotFoundError, PersistenceError, ValidationError
from ..reports.generator import Report, generate
from ..reports.summary import DaySummary, summarize
from ..roster.reconciler import RosterReconciler
from ..staff.repository import StaffRepository
from .ledger import AttendanceLedger
from .model import AttendanceEntry, EntryState
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceSession:
    """Per-client store: roster, ledger and selected date.

    Every mutation is validated, applied locally, then written to the record
    store. A failed write is reported as PersistenceError and the local change
    is kept; `reload()` is the way back to the stored state.
    """

    def __init__(
        self,
        staff: StaffRepository,
        attendance: AttendanceRepository,
        *,
        today: Callable[[], date] = today_local,
    ):
        self._staff = staff
        self._attendance = attendance
        self._today = today
        self._lock = threading.RLock()
        self._ledger = AttendanceLedger()
        self._roster = RosterReconciler(self._ledger)
        self._selected_date: Optional[str] = None
        self.loaded = False

    @property
    def employees(self) -> list[str]:
        return self._roster.names

    @property
    def ledger(self) -> AttendanceLedger:
        return self._ledger

    @property
    def selected_date(self) -> Optional[str]:
        return self._selected_date

    def reload(self) -> None:
        with self._lock:
            staff = self._call("listStaff", self._staff.list_staff)
            entries = self._call("listAttendance", self._attendance.list_attendance)
            ledger = AttendanceLedger.from_entries(entries)
            self._ledger = ledger
            self._roster = RosterReconciler(ledger, [e.name for e in staff])
            self.loaded = True
        logger.info("session loaded: %d staff, %d entries", len(staff), len(entries))

    def select_date(self, value: str) -> str:
        """Validates before assigning, so a rejected date keeps the previous selection."""
        selected = require_past_or_today(value, today=self._today())
        with self._lock:
            self._selected_date = selected
        return selected

    def add_employee(self, name: str) -> str:
        with self._lock:
            name = self._roster.add(name)
            self._call("addStaff", self._staff.add_staff, name)
        return name

    def rename_employee(self, old: str, new: str) -> bool:
        with self._lock:
            new = (new or "").strip()
            if not self._roster.rename(old, new):
                return False
            self._call("renameStaff", self._staff.rename_staff, old, new)
        return True

    def remove_employee(self, name: str) -> None:
        with self._lock:
            self._roster.remove(name)
            self._call("removeStaff", self._staff.remove_staff, name)

    def set_status(self, name: str, status: str | AttendanceStatus) -> EntryState:
        status = parse_status(status)
        with self._lock:
            day = self._require_day(name)
            state = self._ledger.set(day, name, status=status)
            self._save(day, name, state)
        return state

    def set_reason(self, name: str, reason: str) -> EntryState:
        with self._lock:
            day = self._require_day(name)
            state = self._ledger.set(day, name, reason=reason or "")
            self._save(day, name, state)
        return state

    def summary(self, day: Optional[str] = None) -> DaySummary:
        day = day or self._selected_date
        return summarize(self._ledger.day(day) if day else {})

    def day_entries(self, day: Optional[str] = None) -> dict[str, EntryState]:
        day = day or self._selected_date
        return dict(self._ledger.day(day)) if day else {}

    def report(self, mode: ReportMode | str, anchor: Optional[str] = None) -> Report:
        anchor = anchor or self._selected_date
        if not anchor:
            raise ValidationError("Select a date first!")
        result = generate(self._ledger, ReportMode(mode), parse_iso_date(anchor), self._roster.names)
        if isinstance(result, NoDataError):
            raise result
        return result

    def _require_day(self, name: str) -> str:
        if not self._selected_date:
            raise ValidationError("Select a date first!")
        if name not in self._roster:
            raise NotFoundError(f"Employee not found: {name}")
        return self._selected_date

    def _save(self, day: str, name: str, state: EntryState) -> None:
        entry = AttendanceEntry(date=day, employee=name, status=state.status, reason=state.reason)
        self._call("saveAttendance", self._attendance.save_attendance, entry)

    def _call(self, operation: str, fn, *args):
        try:
            return fn(*args)
        except DomainError:
            raise
        except Exception as e:
            logger.exception("record store call %s failed", operation)
            raise PersistenceError(f"Record store error during {operation}") from e


class SessionRegistry:
    """Maps session tokens (kept in the Flask session cookie) to AttendanceSession objects.

    Holds at most ``max_sessions`` stores; the least recently used one is dropped first.
    """

    def __init__(self, factory: Callable[[], AttendanceSession], *, max_sessions: int = DEFAULT_MAX_SESSIONS):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._factory = factory
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, AttendanceSession] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, token: Optional[str]) -> tuple[str, AttendanceSession]:
        with self._lock:
            if token and token in self._sessions:
                self._sessions.move_to_end(token)
                return token, self._sessions[token]
            token = uuid.uuid4().hex
            store = self._factory()
            self._sessions[token] = store
            while len(self._sessions) > self._max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.debug("evicted attendance session %s", evicted)
            return token, store

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
