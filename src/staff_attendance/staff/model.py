from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Roster member. The name is the identity."""

    name: str

    def to_dict(self) -> dict:
        return {"name": self.name}
