"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the payroll rules live in the services.
"""

import importlib

from config import get_settings_module

from payroll_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)
    report = container.payroll_report_service.build_report()
    for row in report.rows:
        print(row.sno, row.employee.name, row.basic, row.tax, row.net)
    print(report.summary)


if __name__ == "__main__":
    main()
