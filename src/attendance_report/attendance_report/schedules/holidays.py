from __future__ import annotations

import csv
import io
import logging

from ..common.datetime_utils import parse_date

logger = logging.getLogger(__name__)


def parse_holidays(text: str) -> frozenset:
    """Read a header-less CSV whose first column is a date token.

    Rows whose first cell is not a recognizable date (a header line, a
    comment, garbage) are ignored.
    """
    holidays = set()
    for row in csv.reader(io.StringIO(text or "")):
        if not row or not row[0].strip():
            continue
        parsed = parse_date(row[0])
        if parsed is None:
            logger.debug("Ignoring holiday row: %r", row)
            continue
        holidays.add(parsed)

    logger.info("Loaded %d holidays", len(holidays))
    return frozenset(holidays)
