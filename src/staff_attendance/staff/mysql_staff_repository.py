from __future__ import annotations

from typing import Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConflictError, DuplicateNameError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, store_operation
from .model import Employee
from .repository import StaffRepository


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_staff(self) -> Sequence[Employee]:
        with store_operation("listStaff"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT name FROM staff ORDER BY created_at ASC, name ASC")
            return [Employee(name=r["name"]) for r in fetchall(cur)]

    def add_staff(self, name: str) -> None:
        with store_operation("addStaff"), db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute("INSERT INTO staff(name) VALUES(%s)", (name,))
            except mysql.connector.IntegrityError as e:
                if e.errno == errorcode.ER_DUP_ENTRY:
                    raise DuplicateNameError("Employee already exists!") from e
                raise

    def rename_staff(self, old_name: str, new_name: str) -> None:
        with store_operation("renameStaff"), db_cursor(self._conn_factory) as (_, cur):
            try:
                # attendance_records follows through ON UPDATE CASCADE
                cur.execute("UPDATE staff SET name=%s WHERE name=%s", (new_name, old_name))
            except mysql.connector.IntegrityError as e:
                if e.errno == errorcode.ER_DUP_ENTRY:
                    raise ConflictError(f"Employee already exists: {new_name}") from e
                raise
            if cur.rowcount == 0:
                raise NotFoundError(f"Employee not found: {old_name}")

    def remove_staff(self, name: str) -> None:
        with store_operation("removeStaff"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM staff WHERE name=%s", (name,))
