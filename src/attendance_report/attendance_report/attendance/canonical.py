from __future__ import annotations

from datetime import date, time
from typing import Iterable, Optional

from .model import AttendanceEvent


class CanonicalLog:
    """Earliest punch per (employee_id, work_date).

    Several punches on the same day collapse to the first one of the day.
    """

    def __init__(self, entries: Optional[dict[tuple[str, date], time]] = None):
        self._entries: dict[tuple[str, date], time] = dict(entries or {})
        # employee_id -> [(work_date, punch_time)] ordered by date
        self._by_employee: dict[str, list[tuple[date, time]]] = {}
        for (emp, d), t in self._entries.items():
            self._by_employee.setdefault(emp, []).append((d, t))
        for items in self._by_employee.values():
            items.sort(key=lambda x: x[0])

    @classmethod
    def from_events(cls, events: Iterable[AttendanceEvent], *, year_month: Optional[str] = None) -> "CanonicalLog":
        entries: dict[tuple[str, date], time] = {}
        for ev in events:
            if year_month and ev.year_month != year_month:
                continue
            key = (ev.employee_id, ev.work_date)
            current = entries.get(key)
            if current is None or ev.punch_time < current:
                entries[key] = ev.punch_time
        return cls(entries)

    def get(self, employee_id: str, work_date: date) -> Optional[time]:
        return self._entries.get((employee_id, work_date))

    def for_employee(self, employee_id: str) -> list[tuple[date, time]]:
        """Entries for exactly this employee id, ordered by date."""
        return list(self._by_employee.get(employee_id, ()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: tuple[str, date]) -> bool:
        return key in self._entries
