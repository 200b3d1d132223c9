from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.extractor import LogLineExtractor
from .attendance.factory import AttendanceStrategyFactory
from .common.datetime_utils import parse_cutoff
from .core.constants import (
    DEFAULT_HOLIDAYS_FILE,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_LATE_CUTOFF,
    DEFAULT_LOGS_FILE,
    DEFAULT_ROSTER_FILE,
)
from .core.exceptions import ValidationError
from .reports.calculator.standard_calculator import CutoffLatenessCalculator
from .reports.service import AttendanceReportService, ReconciliationEngine
from .sources.file_source_repository import FileSourceRepository
from .sources.http_source_repository import HttpSourceRepository
from .sources.loader import SourceLoader
from .sources.repository import SourceRepository
from .users.normalizer import RosterNormalizer


@dataclass(frozen=True)
class Container:
    sources: SourceRepository
    loader: SourceLoader
    engine: ReconciliationEngine
    report_service: AttendanceReportService


def build_sources(source_config: dict[str, Any]) -> SourceRepository:
    backend = str(source_config.get("backend", "file")).lower()
    names = {
        "roster_file": str(source_config.get("roster_file") or DEFAULT_ROSTER_FILE),
        "logs_file": str(source_config.get("logs_file") or DEFAULT_LOGS_FILE),
        "holidays_file": str(source_config.get("holidays_file") or DEFAULT_HOLIDAYS_FILE),
    }
    if backend == "http":
        return HttpSourceRepository(
            str(source_config.get("base_url", "")),
            timeout=float(source_config.get("timeout", DEFAULT_HTTP_TIMEOUT_SECONDS)),
            **names,
        )
    if backend == "file":
        return FileSourceRepository(str(source_config.get("directory", ".")), **names)
    raise ValidationError(f"Unknown source backend: {backend}")


def build_container(
    *,
    source_config: dict[str, Any],
    late_cutoff: str = DEFAULT_LATE_CUTOFF,
    sources: Optional[SourceRepository] = None,
) -> Container:
    sources = sources or build_sources(source_config)
    loader = SourceLoader(sources)
    engine = ReconciliationEngine(
        calculator=CutoffLatenessCalculator(parse_cutoff(late_cutoff)),
        strategy_factory=AttendanceStrategyFactory(),
    )
    report_service = AttendanceReportService(
        loader,
        engine=engine,
        extractor=LogLineExtractor(),
        normalizer=RosterNormalizer(),
    )

    return Container(
        sources=sources,
        loader=loader,
        engine=engine,
        report_service=report_service,
    )
