from __future__ import annotations

from dataclasses import dataclass

from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_punch(self, *, late_minutes: int) -> AttendanceStrategy:
        if late_minutes > 0:
            return LateStrategy()
        return NormalStrategy()

    def for_missing_punch(self) -> AttendanceStrategy:
        return AbsentStrategy()
