from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class StaffRepository(Protocol):
    """Record store interface for the roster.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_staff(self) -> Sequence[Employee]:
        raise NotImplementedError

    def add_staff(self, name: str) -> None:
        """Raises DuplicateNameError when the name is already stored."""

        raise NotImplementedError

    def rename_staff(self, old_name: str, new_name: str) -> None:
        """Re-keys the employee and their attendance. Raises NotFoundError for unknown names."""

        raise NotImplementedError

    def remove_staff(self, name: str) -> None:
        raise NotImplementedError
