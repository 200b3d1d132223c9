from datetime import date, time

import pytest

from src.attendance_report.attendance_report.attendance.extractor import LogLineExtractor


@pytest.fixture
def extractor():
    return LogLineExtractor()


@pytest.mark.parametrize(
    "line",
    [
        "1234,2024-03-04,08:10:00",
        "08:10:00;1234;04/03/2024",
        "2024/03/04 08:10:00 1234",
        "  >> user 1234 @ 2024-03-04 08:10:00 door=main <<  ",
        "\t1234\t\t04/03/2024\t08:10:00\tIN\r",
    ],
)
def test_extracts_regardless_of_column_order_and_noise(extractor, line):
    ev = extractor.extract_line(line)

    assert ev is not None
    assert ev.employee_id == "1234"
    assert ev.work_date == date(2024, 3, 4)
    assert ev.punch_time == time(8, 10, 0)


@pytest.mark.parametrize(
    "line",
    [
        "1234 08:10:00",  # no date
        "1234 2024-03-04",  # no time
        "2024-03-04 08:10:00 OK",  # no id
        "12345678901 2024-03-04 08:10:00",  # id longer than 10 digits
        "EMP1234 2024-03-04 08:10:00",  # digits not standalone
        "5 2024-13-40 08:10:00",  # date-shaped but not a date
        "5 31/02/2024 08:10:00",
        "5 2024-03-04 25:61:00",
        "",
    ],
)
def test_lines_missing_a_piece_yield_nothing(extractor, line):
    assert extractor.extract_line(line) is None


def test_id_is_searched_after_removing_date_and_time(extractor):
    # without removal the first digit run would be the year
    ev = extractor.extract_line("2024-03-04 07:05:00 42")

    assert ev.employee_id == "42"
    assert ev.punch_time == time(7, 5, 0)


def test_leading_zeros_in_id_are_kept(extractor):
    assert extractor.extract_line("007 2024-03-04 08:00:00").employee_id == "007"


def test_ambiguous_slashed_date_is_day_first(extractor):
    ev = extractor.extract_line("9 03/04/2024 08:00:00")
    assert ev.work_date == date(2024, 4, 3)


def test_extract_all_collects_months_newest_first(extractor):
    text = "\n".join(
        [
            "No,Fecha,Hora",
            "1,2024-02-28,08:00:00",
            "1,2024-03-01,08:00:00",
            "2,2024-03-01,09:00:00",
            "1,2024-03-01,07:30:00",
            "garbage",
            "",
        ]
    )

    result = extractor.extract_all(text)

    assert len(result.events) == 4
    assert result.months == ("2024-03", "2024-02")
    assert result.latest_month == "2024-03"
    assert result.skipped == 2


def test_extract_all_on_empty_text(extractor):
    result = extractor.extract_all("")

    assert result.events == ()
    assert result.latest_month is None


@pytest.mark.parametrize(
    "line",
    [
        "٤٢ 2024-03-04 08:00:00",  # Arabic-Indic digits as id
        "42 ٢٠٢٤-03-04 08:00:00",  # non-ASCII digits in date
        "42 2024-03-04 ٠٨:00:00",  # non-ASCII digits in time
    ],
)
def test_only_ascii_digits_are_recognized(extractor, line):
    assert extractor.extract_line(line) is None
