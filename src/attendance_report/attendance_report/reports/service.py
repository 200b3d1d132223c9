from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..attendance.canonical import CanonicalLog
from ..attendance.extractor import LogLineExtractor
from ..attendance.factory import AttendanceStrategyFactory
from ..attendance.model import AttendanceEvent, DailyRecord
from ..common.datetime_utils import today_local
from ..core.constants import ALL_AREAS, NO_PUNCH
from ..schedules.holidays import parse_holidays
from ..schedules.model import YearMonth
from ..schedules.service import CalendarService
from ..sources.loader import SourceLoader
from ..users.model import Employee
from ..users.normalizer import RosterNormalizer
from .calculator.base import LatenessCalculator
from .calculator.standard_calculator import CutoffLatenessCalculator
from .model import Dataset, EmployeeSummary, ReportData, ReportFilters, ReportTotals

logger = logging.getLogger(__name__)


class ReconciliationEngine:
    """Joins punches, roster and calendar into daily records and per-employee totals.

    Pure in-memory computation; ``today`` is passed in so results are
    reproducible.
    """

    def __init__(
        self,
        *,
        calculator: Optional[LatenessCalculator] = None,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
    ):
        self._calculator = calculator or CutoffLatenessCalculator()
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def reconcile(
        self,
        *,
        employees: Iterable[Employee],
        events: Iterable[AttendanceEvent],
        holidays: Iterable[date],
        month: YearMonth | str,
        today: date,
        filters: Optional[ReportFilters] = None,
    ) -> ReportData:
        if isinstance(month, str):
            month = YearMonth.parse(month)
        filters = filters or ReportFilters()

        calendar = CalendarService(holidays)
        log = CanonicalLog.from_events(events, year_month=str(month))
        workdays = calendar.workdays(month)

        summary: list[EmployeeSummary] = []
        details: list[DailyRecord] = []

        for emp in employees:
            if not filters.matches(emp):
                continue

            late_count = 0
            late_minutes_total = 0
            absence_count = 0
            attended: set[date] = set()

            for work_date, punch_time in log.for_employee(emp.employee_id):
                attended.add(work_date)
                minutes = self._calculator.late_minutes(punch_time)
                decision = self._factory.for_punch(late_minutes=minutes).decide(late_minutes=minutes)
                if decision.late_minutes > 0:
                    late_count += 1
                    late_minutes_total += decision.late_minutes

                details.append(
                    DailyRecord(
                        work_date=work_date,
                        employee_id=emp.employee_id,
                        employee_name=emp.name,
                        area=emp.area,
                        punch=punch_time.strftime("%H:%M:%S"),
                        late_minutes=decision.late_minutes,
                        status=decision.status,
                        is_holiday=calendar.is_holiday(work_date),
                    )
                )

            for day in workdays:
                if day > today or day in attended:
                    continue
                decision = self._factory.for_missing_punch().decide(late_minutes=0)
                absence_count += 1
                details.append(
                    DailyRecord(
                        work_date=day,
                        employee_id=emp.employee_id,
                        employee_name=emp.name,
                        area=emp.area,
                        punch=NO_PUNCH,
                        late_minutes=decision.late_minutes,
                        status=decision.status,
                    )
                )

            # late_only hides the summary row only; detail rows are kept.
            if filters.late_only and late_count == 0:
                continue

            summary.append(
                EmployeeSummary(
                    employee_id=emp.employee_id,
                    name=emp.name,
                    area=emp.area,
                    late_count=late_count,
                    late_minutes_total=late_minutes_total,
                    absence_count=absence_count,
                )
            )

        details.sort(key=lambda r: r.work_date, reverse=True)
        return ReportData(month=str(month), summary=summary, details=details, totals=ReportTotals.of(summary))


class AttendanceReportService:
    """Loads the sources, parses them and runs reports against the parsed snapshot."""

    def __init__(
        self,
        loader: SourceLoader,
        *,
        engine: Optional[ReconciliationEngine] = None,
        extractor: Optional[LogLineExtractor] = None,
        normalizer: Optional[RosterNormalizer] = None,
    ):
        self._loader = loader
        self._engine = engine or ReconciliationEngine()
        self._extractor = extractor or LogLineExtractor()
        self._normalizer = normalizer or RosterNormalizer()

    def load(self) -> Dataset:
        """Fetch and parse all sources. Raises DataUnavailableError if any is missing."""
        snapshot = self._loader.load()

        employees = self._normalizer.parse(snapshot.roster_text)
        extraction = self._extractor.extract_all(snapshot.logs_text)
        holidays = parse_holidays(snapshot.holidays_text)

        return Dataset(
            employees=tuple(employees),
            events=extraction.events,
            holidays=holidays,
            months=extraction.months,
        )

    def available_months(self, dataset: Dataset) -> list[str]:
        return list(dataset.months)

    def available_areas(self, dataset: Dataset) -> list[str]:
        return [ALL_AREAS, *dataset.areas()]

    def default_month(self, dataset: Dataset, *, today: Optional[date] = None) -> str:
        if dataset.latest_month:
            return dataset.latest_month
        return str(YearMonth.of(today or today_local()))

    def build(
        self,
        filters: Optional[ReportFilters] = None,
        *,
        today: Optional[date] = None,
        dataset: Optional[Dataset] = None,
    ) -> ReportData:
        filters = filters or ReportFilters()
        today = today or today_local()
        dataset = dataset or self.load()
        month = filters.month or self.default_month(dataset, today=today)

        report = self._engine.reconcile(
            employees=dataset.employees,
            events=dataset.events,
            holidays=dataset.holidays,
            month=month,
            today=today,
            filters=filters,
        )
        logger.info(
            "Report %s: %d employees, %d detail rows",
            report.month,
            len(report.summary),
            len(report.details),
        )
        return report
