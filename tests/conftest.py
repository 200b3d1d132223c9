from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from src.attendance_report.attendance_report.sources.memory_source_repository import InMemorySourceRepository

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 31)


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def ana_sources() -> InMemorySourceRepository:
    return InMemorySourceRepository(
        roster_text="id,name,area\n1,Ana,IT\n",
        logs_text="dev7 | 1 | 2024-03-04 08:10:00 | IN\n",
        holidays_text="",
    )
