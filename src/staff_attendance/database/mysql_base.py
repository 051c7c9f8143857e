from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List

import mysql.connector

from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def store_operation(name: str):
    """Translate driver errors into PersistenceError, keeping domain errors as they are."""
    try:
        yield
    except mysql.connector.Error as e:
        logger.error("record store operation %s failed: %s", name, e)
        raise PersistenceError(f"Record store error during {name}") from e


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
