from datetime import date, time

import pytest

from src.attendance_report.attendance_report.common.datetime_utils import (
    minutes_since_midnight,
    parse_clock,
    parse_cutoff,
    parse_date,
    parse_iso_date,
    parse_year_month,
)
from src.attendance_report.attendance_report.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "token, expected",
    [
        ("2024-03-04", date(2024, 3, 4)),
        ("04/03/2024", date(2024, 3, 4)),
        ("12/25/2024", date(2024, 12, 25)),
        ("2024/03/04", date(2024, 3, 4)),
        ("  2024-03-04 ", date(2024, 3, 4)),
    ],
)
def test_parse_date_accepted_formats(token, expected):
    assert parse_date(token) == expected


def test_parse_date_prefers_day_first_when_ambiguous():
    assert parse_date("03/04/2024") == date(2024, 4, 3)


@pytest.mark.parametrize("token", ["", "2024-13-01", "31/02/2024", "13/25/2024", "04-03-2024", "yesterday"])
def test_parse_date_rejects_invalid(token):
    assert parse_date(token) is None


def test_parse_date_reads_back_iso_formatted_dates():
    start = date(2024, 1, 1).toordinal()
    for offset in range(366):
        d = date.fromordinal(start + offset)
        assert parse_date(d.strftime("%Y-%m-%d")) == d


def test_parse_clock_accepts_single_digit_hour():
    assert parse_clock("7:05:09") == time(7, 5, 9)
    assert parse_clock("25:00:00") is None


def test_minutes_since_midnight_truncates_seconds():
    assert minutes_since_midnight(time(8, 5, 59)) == 485


def test_parse_year_month_and_errors():
    assert parse_year_month("2024-02") == (2024, 2)
    with pytest.raises(ValidationError):
        parse_year_month("2024-13")
    with pytest.raises(ValidationError):
        parse_cutoff("8 o'clock")
    with pytest.raises(ValidationError):
        parse_iso_date("31/03/2024")
