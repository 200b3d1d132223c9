from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import parse_year_month


@dataclass(frozen=True, order=True)
class YearMonth:
    year: int
    month: int

    @classmethod
    def parse(cls, value: str) -> "YearMonth":
        year, month = parse_year_month(value)
        return cls(year=year, month=month)

    @classmethod
    def of(cls, value: date) -> "YearMonth":
        return cls(year=value.year, month=value.month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
