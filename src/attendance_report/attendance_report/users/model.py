from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_AREA


@dataclass(frozen=True)
class Employee:
    """Roster entry. Identity is the opaque ``employee_id`` token."""

    employee_id: str
    name: str
    area: str = DEFAULT_AREA
