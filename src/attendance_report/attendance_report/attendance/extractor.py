from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.datetime_utils import parse_clock, parse_date
from .model import AttendanceEvent

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"\d{4}[-/]\d{2}[-/]\d{2}|\d{2}[-/]\d{2}[-/]\d{4}", re.ASCII)
TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}:\d{2}", re.ASCII)
ID_PATTERN = re.compile(r"\b\d{1,10}\b", re.ASCII)


@dataclass(frozen=True)
class ExtractionResult:
    events: tuple[AttendanceEvent, ...]
    months: tuple[str, ...]
    skipped: int = 0

    @property
    def latest_month(self) -> Optional[str]:
        return self.months[0] if self.months else None


class LogLineExtractor:
    """Best-effort extractor for biometric export lines.

    Exports come from different devices, so no column layout is assumed.
    Rules are applied in a fixed order:

    1. the first date-shaped token (``yyyy-mm-dd`` / ``dd/mm/yyyy`` style),
    2. the first ``h:mm:ss`` token,
    3. with both removed, the first standalone run of 1-10 digits is the
       employee id,
    4. the date token must parse to a real calendar date.

    A line missing any piece yields nothing.
    """

    def extract_line(self, line: str) -> Optional[AttendanceEvent]:
        date_match = DATE_PATTERN.search(line)
        if not date_match:
            return None
        time_match = TIME_PATTERN.search(line)
        if not time_match:
            return None

        date_str = date_match.group(0)
        time_str = time_match.group(0)
        remainder = line.replace(date_str, "", 1).replace(time_str, "", 1)
        id_match = ID_PATTERN.search(remainder)
        if not id_match:
            return None

        work_date = parse_date(date_str)
        if work_date is None:
            return None
        punch_time = parse_clock(time_str)
        if punch_time is None:
            return None

        return AttendanceEvent(employee_id=id_match.group(0), work_date=work_date, punch_time=punch_time)

    def extract_all(self, text: str) -> ExtractionResult:
        return self.extract_lines((text or "").splitlines())

    def extract_lines(self, lines: Iterable[str]) -> ExtractionResult:
        events: list[AttendanceEvent] = []
        months: set[str] = set()
        skipped = 0

        for line in lines:
            if not line.strip():
                continue
            ev = self.extract_line(line)
            if ev is None:
                skipped += 1
                logger.debug("Skipping unrecognized log line: %r", line)
                continue
            events.append(ev)
            months.add(ev.year_month)

        logger.info("Extracted %d punches (%d lines skipped)", len(events), skipped)
        return ExtractionResult(
            events=tuple(events),
            months=tuple(sorted(months, reverse=True)),
            skipped=skipped,
        )
