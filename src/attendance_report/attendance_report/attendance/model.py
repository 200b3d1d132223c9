from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time

from ..common.datetime_utils import format_year_month
from ..core.constants import HOLIDAY_SUFFIX
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEvent:
    """One punch recovered from a biometric log line."""

    employee_id: str
    work_date: date
    punch_time: time

    @property
    def year_month(self) -> str:
        return format_year_month(self.work_date)


@dataclass(frozen=True)
class DailyRecord:
    """Read-model for the daily detail table."""

    work_date: date
    employee_id: str
    employee_name: str
    area: str
    punch: str
    late_minutes: int
    status: AttendanceStatus
    is_holiday: bool = False

    @property
    def status_label(self) -> str:
        label = self.status.value.replace("_", " ")
        if self.is_holiday:
            label += HOLIDAY_SUFFIX
        return label

    def to_dict(self) -> dict:
        return {
            "work_date": self.work_date.strftime("%Y-%m-%d"),
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "area": self.area,
            "punch": self.punch,
            "late_minutes": self.late_minutes,
            "status": self.status.value,
            "status_label": self.status_label,
            "is_holiday": self.is_holiday,
        }
