from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from ..core.enums import SourceKind
from ..core.exceptions import DataUnavailableError
from .model import SourceSnapshot
from .repository import SourceRepository

logger = logging.getLogger(__name__)


class SourceLoader:
    """Fetches the three sources concurrently and waits for all of them.

    If any source fails, the whole load fails with one DataUnavailableError.
    """

    def __init__(self, sources: SourceRepository):
        self._sources = sources

    def load(self) -> SourceSnapshot:
        getters = {
            SourceKind.ROSTER: self._sources.get_roster_text,
            SourceKind.LOGS: self._sources.get_logs_text,
            SourceKind.HOLIDAYS: self._sources.get_holidays_text,
        }

        with ThreadPoolExecutor(max_workers=len(getters)) as pool:
            futures = {kind: pool.submit(fn) for kind, fn in getters.items()}

        texts: dict[SourceKind, str] = {}
        failed: list[str] = []
        for kind, future in futures.items():
            try:
                texts[kind] = future.result()
            except DataUnavailableError as e:
                logger.warning("Source %s unavailable: %s", kind.value, e)
                failed.append(kind.value)

        if failed:
            raise DataUnavailableError(
                f"Data unavailable: {', '.join(failed)}",
                failed=tuple(failed),
            )

        return SourceSnapshot(
            roster_text=texts[SourceKind.ROSTER],
            logs_text=texts[SourceKind.LOGS],
            holidays_text=texts[SourceKind.HOLIDAYS],
        )
