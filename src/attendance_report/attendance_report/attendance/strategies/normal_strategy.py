from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """Punch at or before the cutoff."""

    def decide(self, *, late_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME, late_minutes=0)
