from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceEvent, DailyRecord
from ..core.constants import ALL_AREAS
from ..users.model import Employee


@dataclass(frozen=True)
class ReportFilters:
    """Per-request parameters. ``month`` of None means the newest month in the logs."""

    month: Optional[str] = None
    area: str = ALL_AREAS
    name_query: str = ""
    late_only: bool = False

    def matches(self, employee: Employee) -> bool:
        if self.area and self.area != ALL_AREAS and employee.area != self.area:
            return False
        query = (self.name_query or "").strip().lower()
        if query and query not in employee.name.lower():
            return False
        return True


@dataclass(frozen=True)
class EmployeeSummary:
    employee_id: str
    name: str
    area: str
    late_count: int
    late_minutes_total: int
    absence_count: int

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "area": self.area,
            "late_count": self.late_count,
            "late_minutes_total": self.late_minutes_total,
            "absence_count": self.absence_count,
        }


@dataclass(frozen=True)
class ReportTotals:
    late_count: int = 0
    late_minutes: int = 0
    absences: int = 0

    @classmethod
    def of(cls, summary: list[EmployeeSummary]) -> "ReportTotals":
        return cls(
            late_count=sum(s.late_count for s in summary),
            late_minutes=sum(s.late_minutes_total for s in summary),
            absences=sum(s.absence_count for s in summary),
        )


@dataclass(frozen=True)
class ReportData:
    month: str
    summary: list[EmployeeSummary]
    details: list[DailyRecord]
    totals: ReportTotals = field(default_factory=ReportTotals)

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "summary": [s.to_dict() for s in self.summary],
            "details": [d.to_dict() for d in self.details],
            "totals": {
                "late_count": self.totals.late_count,
                "late_minutes": self.totals.late_minutes,
                "absences": self.totals.absences,
            },
        }


@dataclass(frozen=True)
class Dataset:
    """Parsed snapshot of the three sources; rebuilt on every load."""

    employees: tuple[Employee, ...]
    events: tuple[AttendanceEvent, ...]
    holidays: frozenset
    months: tuple[str, ...] = ()

    @property
    def latest_month(self) -> Optional[str]:
        return self.months[0] if self.months else None

    def areas(self) -> list[str]:
        return sorted({e.area for e in self.employees})
