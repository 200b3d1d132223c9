from __future__ import annotations

import calendar
from datetime import date
from typing import Iterable, Optional

from .model import YearMonth


class CalendarService:
    """Expected workdays of a month: weekdays minus declared holidays."""

    def __init__(self, holidays: Optional[Iterable[date]] = None):
        self._holidays = frozenset(holidays or ())

    def is_holiday(self, day: date) -> bool:
        return day in self._holidays

    def workdays(self, year_month: YearMonth | str) -> list[date]:
        if isinstance(year_month, str):
            year_month = YearMonth.parse(year_month)

        _, days_in_month = calendar.monthrange(year_month.year, year_month.month)
        out: list[date] = []
        for d in range(1, days_in_month + 1):
            day = date(year_month.year, year_month.month, d)
            # Monday=0 ... Saturday=5, Sunday=6
            if day.weekday() >= 5 or day in self._holidays:
                continue
            out.append(day)
        return out
