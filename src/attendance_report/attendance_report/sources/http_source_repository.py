from __future__ import annotations

import logging
from typing import Optional

import requests

from ..common.validators import require_non_empty
from ..core.constants import (
    DEFAULT_HOLIDAYS_FILE,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_LOGS_FILE,
    DEFAULT_ROSTER_FILE,
)
from ..core.exceptions import DataUnavailableError

logger = logging.getLogger(__name__)


class HttpSourceRepository:
    """Fetches the three CSV exports from a static file server."""

    def __init__(
        self,
        base_url: str,
        *,
        roster_file: str = DEFAULT_ROSTER_FILE,
        logs_file: str = DEFAULT_LOGS_FILE,
        holidays_file: str = DEFAULT_HOLIDAYS_FILE,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = require_non_empty(base_url, "SOURCE_BASE_URL").rstrip("/")
        self._roster_file = roster_file
        self._logs_file = logs_file
        self._holidays_file = holidays_file
        self._timeout = timeout
        self._session = session or requests.Session()

    def _fetch(self, name: str) -> str:
        url = f"{self._base_url}/{name.lstrip('/')}"
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Could not fetch %s: %s", url, e)
            raise DataUnavailableError(f"Could not fetch {url}") from e
        return self._decode(response, url)

    @staticmethod
    def _decode(response: requests.Response, url: str) -> str:
        # requests assumes ISO-8859-1 for text/* without a charset; exports are UTF-8
        if "charset=" in response.headers.get("Content-Type", "").lower():
            return response.text.lstrip("\ufeff")
        try:
            return response.content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            logger.error("Could not decode %s as UTF-8: %s", url, e)
            raise DataUnavailableError(f"Could not decode {url}") from e

    def get_roster_text(self) -> str:
        return self._fetch(self._roster_file)

    def get_logs_text(self) -> str:
        return self._fetch(self._logs_file)

    def get_holidays_text(self) -> str:
        return self._fetch(self._holidays_file)
