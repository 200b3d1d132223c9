from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Punch after the cutoff."""

    def decide(self, *, late_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE, late_minutes=int(late_minutes))
