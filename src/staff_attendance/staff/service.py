from __future__ import annotations

from ..common.validators import require_non_empty
from ..core.exceptions import DuplicateNameError, ValidationError
from .model import Employee
from .repository import StaffRepository


class StaffService:
    """Use case: roster maintenance through the record store API."""

    def __init__(self, staff: StaffRepository):
        self._staff = staff

    def list_staff(self) -> list[Employee]:
        return list(self._staff.list_staff())

    def add_staff(self, name: str) -> Employee:
        try:
            name = require_non_empty(name, "Employee name")
        except ValidationError as e:
            raise DuplicateNameError(str(e)) from None
        self._staff.add_staff(name)
        return Employee(name=name)

    def rename_staff(self, old_name: str, new_name: str) -> Employee:
        old_name = require_non_empty(old_name, "Employee name")
        # A blank new name leaves the record untouched, same as the roster rename.
        new_name = (new_name or "").strip()
        if not new_name or new_name == old_name:
            return Employee(name=old_name)
        self._staff.rename_staff(old_name, new_name)
        return Employee(name=new_name)

    def remove_staff(self, name: str) -> None:
        self._staff.remove_staff(require_non_empty(name, "Employee name"))
