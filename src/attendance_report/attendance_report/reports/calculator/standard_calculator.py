from __future__ import annotations

from datetime import time

from ...common.datetime_utils import seconds_since_midnight
from .base import LatenessCalculator


class CutoffLatenessCalculator(LatenessCalculator):
    """Standard rule: whole minutes past a fixed daily cutoff, not below 0.

    Only time of day is compared; partial minutes are truncated, so a punch
    at 08:00:59 against an 08:00 cutoff is not late.
    """

    def __init__(self, cutoff: time = time(8, 0)):
        self._cutoff = cutoff

    def late_minutes(self, punch_time: time) -> int:
        elapsed = seconds_since_midnight(punch_time) - seconds_since_midnight(self._cutoff)
        return max(elapsed, 0) // 60
