from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import DataUnavailableError


@dataclass
class InMemorySourceRepository:
    """Serves texts held in memory. A None text behaves like a missing source."""

    roster_text: Optional[str] = ""
    logs_text: Optional[str] = ""
    holidays_text: Optional[str] = ""

    @staticmethod
    def _require(value: Optional[str], name: str) -> str:
        if value is None:
            raise DataUnavailableError(f"{name} source is not available")
        return value

    def get_roster_text(self) -> str:
        return self._require(self.roster_text, "roster")

    def get_logs_text(self) -> str:
        return self._require(self.logs_text, "logs")

    def get_holidays_text(self) -> str:
        return self._require(self.holidays_text, "holidays")
