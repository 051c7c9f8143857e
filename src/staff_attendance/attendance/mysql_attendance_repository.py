from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, store_operation
from .model import AttendanceEntry
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _stored_status(value) -> AttendanceStatus:
    try:
        return AttendanceStatus(value or "")
    except ValueError:
        logger.warning("unknown stored status %r read as unset", value)
        return AttendanceStatus.UNSET


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_attendance(self) -> Sequence[AttendanceEntry]:
        with store_operation("listAttendance"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_date, employee, status, reason
                FROM attendance_records
                ORDER BY work_date ASC
                """
            )
            rows = fetchall(cur)
            return [
                AttendanceEntry(
                    date=r["work_date"].isoformat(),
                    employee=r["employee"],
                    status=_stored_status(r.get("status")),
                    reason=r.get("reason") or "",
                )
                for r in rows
            ]

    def save_attendance(self, entry: AttendanceEntry) -> None:
        with store_operation("saveAttendance"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(work_date, employee, status, reason)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), reason=VALUES(reason)
                """,
                (entry.date, entry.employee, entry.status.value, entry.reason),
            )
