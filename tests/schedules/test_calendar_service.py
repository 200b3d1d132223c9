from datetime import date

import pytest

from src.attendance_report.attendance_report.core.exceptions import ValidationError
from src.attendance_report.attendance_report.schedules.holidays import parse_holidays
from src.attendance_report.attendance_report.schedules.model import YearMonth
from src.attendance_report.attendance_report.schedules.service import CalendarService


def test_february_2024_has_21_workdays():
    days = CalendarService().workdays("2024-02")

    assert len(days) == 21
    assert days[0] == date(2024, 2, 1)
    assert days[-1] == date(2024, 2, 29)
    for weekend in (3, 4, 10, 11, 17, 18, 24, 25):
        assert date(2024, 2, weekend) not in days


def test_workdays_are_ascending_weekdays():
    days = CalendarService().workdays(YearMonth(2024, 3))

    assert days == sorted(days)
    assert all(d.weekday() < 5 for d in days)
    assert len(days) == 21


def test_holidays_are_removed():
    svc = CalendarService({date(2024, 3, 28), date(2024, 3, 29), date(2024, 3, 30)})

    days = svc.workdays("2024-03")

    assert len(days) == 19
    assert date(2024, 3, 28) not in days
    assert svc.is_holiday(date(2024, 3, 30))


def test_invalid_month_raises():
    with pytest.raises(ValidationError):
        CalendarService().workdays("March")


def test_year_month_parse_and_str():
    ym = YearMonth.parse("2024-3")

    assert ym == YearMonth(2024, 3)
    assert str(ym) == "2024-03"
    assert YearMonth.of(date(2024, 12, 5)) < YearMonth(2025, 1)


def test_parse_holidays_first_column_any_format():
    text = "fecha,descripcion\n2024-03-28,Jueves Santo\n29/03/2024,Viernes Santo\n\nnot a date\n2024/05/01\n"

    assert parse_holidays(text) == frozenset({date(2024, 3, 28), date(2024, 3, 29), date(2024, 5, 1)})


def test_parse_holidays_empty():
    assert parse_holidays("") == frozenset()
