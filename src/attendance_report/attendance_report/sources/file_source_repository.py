from __future__ import annotations

import logging
from pathlib import Path

from ..core.constants import DEFAULT_HOLIDAYS_FILE, DEFAULT_LOGS_FILE, DEFAULT_ROSTER_FILE
from ..core.exceptions import DataUnavailableError

logger = logging.getLogger(__name__)


class FileSourceRepository:
    """Reads the three CSV exports from a local directory."""

    def __init__(
        self,
        directory: str | Path,
        *,
        roster_file: str = DEFAULT_ROSTER_FILE,
        logs_file: str = DEFAULT_LOGS_FILE,
        holidays_file: str = DEFAULT_HOLIDAYS_FILE,
    ):
        self._dir = Path(directory)
        self._roster_file = roster_file
        self._logs_file = logs_file
        self._holidays_file = holidays_file

    def _read(self, name: str) -> str:
        path = self._dir / name
        try:
            # utf-8-sig: spreadsheet exports often carry a BOM
            return path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read %s: %s", path, e)
            raise DataUnavailableError(f"Could not read {path}") from e

    def get_roster_text(self) -> str:
        return self._read(self._roster_file)

    def get_logs_text(self) -> str:
        return self._read(self._logs_file)

    def get_holidays_text(self) -> str:
        return self._read(self._holidays_file)
