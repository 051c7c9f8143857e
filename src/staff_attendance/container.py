from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.session import AttendanceSession, SessionRegistry
from .common.datetime_utils import today_local
from .core.constants import DEFAULT_MAX_SESSIONS
from .database.connection import DBConfig, DatabaseConnection
from .staff.mysql_staff_repository import MySQLStaffRepository
from .staff.repository import StaffRepository
from .staff.service import StaffService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    staff_repo: StaffRepository
    attendance_repo: AttendanceRepository

    staff_service: StaffService
    attendance_service: AttendanceService
    sessions: SessionRegistry
    today: Callable[[], date]


def wire_container(
    *,
    staff_repo: StaffRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
    today: Callable[[], date] = today_local,
    max_sessions: int = DEFAULT_MAX_SESSIONS,
) -> Container:
    def new_session() -> AttendanceSession:
        return AttendanceSession(staff_repo, attendance_repo, today=today)

    return Container(
        conn=conn,
        staff_repo=staff_repo,
        attendance_repo=attendance_repo,
        staff_service=StaffService(staff_repo),
        attendance_service=AttendanceService(attendance_repo, today=today),
        sessions=SessionRegistry(new_session, max_sessions=max_sessions),
        today=today,
    )


def build_container(*, db_config: dict, max_sessions: int = DEFAULT_MAX_SESSIONS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        staff_repo=MySQLStaffRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
        max_sessions=max_sessions,
    )
