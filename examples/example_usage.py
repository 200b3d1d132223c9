"""Example: run a report through the service layer (without Flask).

Controllers are a thin layer; reconciliation lives in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.attendance_report.attendance_report.container import build_container
from src.attendance_report.attendance_report.reports.model import ReportFilters


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(source_config=settings.SOURCE_CONFIG, late_cutoff=settings.LATE_CUTOFF)

    svc = container.report_service
    dataset = svc.load()
    print("months:", svc.available_months(dataset))
    print("areas:", svc.available_areas(dataset))

    report = svc.build(ReportFilters(late_only=True), today=date.today(), dataset=dataset)
    for row in report.summary:
        print(row.to_dict())


if __name__ == "__main__":
    main()
