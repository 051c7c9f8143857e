from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.ledger import AttendanceLedger
from ..core.exceptions import ConflictError, DuplicateNameError, NotFoundError


class RosterReconciler:
    """Keeps the ordered roster and the ledger consistent under add/rename/remove.

    All checks run before anything is mutated, so a rejected call leaves both
    the roster and the ledger untouched.
    """

    def __init__(self, ledger: AttendanceLedger, names: Optional[Iterable[str]] = None):
        self._ledger = ledger
        self._names: list[str] = list(names or [])

    @property
    def names(self) -> list[str]:
        return list(self._names)

    @property
    def ledger(self) -> AttendanceLedger:
        return self._ledger

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def add(self, name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise DuplicateNameError("Enter employee name!")
        if name in self._names:
            raise DuplicateNameError("Employee already exists!")
        self._names.append(name)
        return name

    def rename(self, old: str, new: str) -> bool:
        """Returns False when the call is a no-op."""
        new = (new or "").strip()
        if not new or new == old:
            return False
        if old not in self._names:
            raise NotFoundError(f"Employee not found: {old}")
        if new in self._names:
            raise ConflictError(f"Employee already exists: {new}")

        self._names[self._names.index(old)] = new
        self._ledger.rename_employee(old, new)
        return True

    def remove(self, name: str) -> None:
        if name not in self._names:
            raise NotFoundError(f"Employee not found: {name}")
        self._names.remove(name)
        self._ledger.remove_employee(name)
