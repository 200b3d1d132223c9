from __future__ import annotations

from typing import Protocol


class SourceRepository(Protocol):
    """Where the roster, log and holiday texts come from.

    Implementations raise DataUnavailableError when a source cannot be read.
    """

    def get_roster_text(self) -> str:
        raise NotImplementedError

    def get_logs_text(self) -> str:
        raise NotImplementedError

    def get_holidays_text(self) -> str:
        raise NotImplementedError
