from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceSnapshot:
    """Raw text of the three sources, taken together at one point in time."""

    roster_text: str
    logs_text: str
    holidays_text: str
