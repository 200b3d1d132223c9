from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Classification of one employee-day."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    ABSENT = "ABSENT"


class SourceKind(str, Enum):
    """The three text sources a report is built from."""

    ROSTER = "roster"
    LOGS = "logs"
    HOLIDAYS = "holidays"
