from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time


class LatenessCalculator(ABC):
    """Calculator interface (Strategy Pattern for lateness)."""

    @abstractmethod
    def late_minutes(self, punch_time: time) -> int:
        raise NotImplementedError
