from __future__ import annotations

import csv
import io
import logging
from typing import Iterable, Optional, Sequence

from ..core.constants import DEFAULT_AREA
from .model import Employee

logger = logging.getLogger(__name__)

# canonical field -> header fragments (case-insensitive substring match)
FIELD_KEYWORDS: dict[str, tuple[str, ...]] = {
    "name": ("nombre", "name"),
    "employee_id": ("id", "codigo"),
    "area": ("area", "depto"),
}


def resolve_headers(headers: Sequence[str]) -> dict[str, int]:
    """Map canonical field -> column index.

    One header may feed several fields. When several headers match the same
    field the last one wins.
    """
    mapping: dict[str, int] = {}
    for idx, header in enumerate(headers):
        key = (header or "").strip().lower()
        for field, keywords in FIELD_KEYWORDS.items():
            if any(k in key for k in keywords):
                mapping[field] = idx
    return mapping


class RosterNormalizer:
    """Turn a roster CSV with arbitrary column names into Employee records."""

    def parse(self, text: str) -> list[Employee]:
        rows = [r for r in csv.reader(io.StringIO(text or "")) if any(c.strip() for c in r)]
        if not rows:
            return []
        return self.normalize_rows(rows[0], rows[1:])

    def normalize_rows(self, headers: Sequence[str], rows: Iterable[Sequence[str]]) -> list[Employee]:
        mapping = resolve_headers(headers)
        by_id: dict[str, Employee] = {}
        dropped = 0

        for row in rows:
            emp = self._to_employee(row, mapping)
            if emp is None:
                dropped += 1
                logger.debug("Dropping roster row without id/name: %r", row)
                continue
            # Duplicate ids: last row wins.
            by_id[emp.employee_id] = emp

        logger.info("Loaded %d employees (%d rows dropped)", len(by_id), dropped)
        return list(by_id.values())

    @staticmethod
    def _to_employee(row: Sequence[str], mapping: dict[str, int]) -> Optional[Employee]:
        def cell(field: str) -> str:
            idx = mapping.get(field)
            if idx is None or idx >= len(row):
                return ""
            return (row[idx] or "").strip()

        employee_id = cell("employee_id")
        name = cell("name")
        if not employee_id or not name:
            return None
        return Employee(employee_id=employee_id, name=name, area=cell("area") or DEFAULT_AREA)
