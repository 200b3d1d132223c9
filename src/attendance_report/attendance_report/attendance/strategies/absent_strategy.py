from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class AbsentStrategy(AttendanceStrategy):
    """Elapsed workday without any punch."""

    def decide(self, *, late_minutes: int = 0) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ABSENT, late_minutes=0)
