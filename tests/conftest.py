from __future__ import annotations

from datetime import date

import pytest

from staff_attendance.attendance.model import AttendanceEntry
from staff_attendance.attendance.session import AttendanceSession
from staff_attendance.core.enums import AttendanceStatus
from staff_attendance.core.exceptions import DuplicateNameError, NotFoundError, PersistenceError
from staff_attendance.staff.model import Employee

FIXED_TODAY = date(2024, 5, 20)


class InMemoryAttendance:
    def __init__(self):
        self.rows: dict[tuple[str, str], AttendanceEntry] = {}
        self.fail = False
        self.saved: list[AttendanceEntry] = []

    def list_attendance(self):
        if self.fail:
            raise PersistenceError("record store unreachable")
        return list(self.rows.values())

    def save_attendance(self, entry: AttendanceEntry) -> None:
        if self.fail:
            raise PersistenceError("record store unreachable")
        self.saved.append(entry)
        self.rows[(entry.date, entry.employee)] = entry


class InMemoryStaff:
    """Roster store; renames and deletes cascade into the attendance fake like the MySQL FK does."""

    def __init__(self, attendance: InMemoryAttendance):
        self.names: list[str] = []
        self.attendance = attendance
        self.fail = False

    def _check(self):
        if self.fail:
            raise PersistenceError("record store unreachable")

    def list_staff(self):
        self._check()
        return [Employee(name=n) for n in self.names]

    def add_staff(self, name: str) -> None:
        self._check()
        if name in self.names:
            raise DuplicateNameError("Employee already exists!")
        self.names.append(name)

    def rename_staff(self, old_name: str, new_name: str) -> None:
        self._check()
        if old_name not in self.names:
            raise NotFoundError(f"Employee not found: {old_name}")
        self.names[self.names.index(old_name)] = new_name
        for key, e in list(self.attendance.rows.items()):
            if e.employee == old_name:
                del self.attendance.rows[key]
                self.attendance.rows[(e.date, new_name)] = AttendanceEntry(e.date, new_name, e.status, e.reason)

    def remove_staff(self, name: str) -> None:
        self._check()
        if name in self.names:
            self.names.remove(name)
        for key in [k for k in self.attendance.rows if k[1] == name]:
            del self.attendance.rows[key]


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def staff_repo(attendance_repo) -> InMemoryStaff:
    return InMemoryStaff(attendance_repo)


@pytest.fixture
def seeded(staff_repo, attendance_repo):
    """Alice and Bob on the roster with two stored days in May 2024 and one in 2023."""
    staff_repo.names.extend(["Alice", "Bob"])
    for e in (
        AttendanceEntry("2024-05-01", "Alice", AttendanceStatus.ABSENT, "sick"),
        AttendanceEntry("2024-05-01", "Bob", AttendanceStatus.PRESENT, ""),
        AttendanceEntry("2024-05-02", "Alice", AttendanceStatus.PRESENT, ""),
        AttendanceEntry("2023-12-29", "Bob", AttendanceStatus.HOLIDAY, "new year"),
    ):
        attendance_repo.rows[(e.date, e.employee)] = e
    return staff_repo, attendance_repo


@pytest.fixture
def session_store(staff_repo, attendance_repo, fixed_today) -> AttendanceSession:
    store = AttendanceSession(staff_repo, attendance_repo, today=lambda: fixed_today)
    store.reload()
    return store


@pytest.fixture
def app(monkeypatch, staff_repo, attendance_repo, fixed_today):
    monkeypatch.setenv("APP_ENV", "testing")
    from staff_attendance.container import wire_container
    from staff_attendance.main import create_app

    container = wire_container(staff_repo=staff_repo, attendance_repo=attendance_repo, today=lambda: fixed_today)
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded_session(seeded, staff_repo, attendance_repo, fixed_today) -> AttendanceSession:
    store = AttendanceSession(staff_repo, attendance_repo, today=lambda: fixed_today)
    store.reload()
    return store
