from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.exporter import PayrollExcelExporter
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository

    employee_service: EmployeeService
    payroll_report_service: PayrollReportService
    payroll_exporter: PayrollExcelExporter


def build_container(
    *,
    data_file: Optional[str] = None,
    employees_repo: Optional[EmployeeRepository] = None,
    id_generator: Optional[Callable[[], int]] = None,
) -> Container:
    if employees_repo is None:
        if not data_file:
            raise ValueError("data_file is required when no repository is given")
        employees_repo = JsonEmployeeRepository(data_file)

    return Container(
        employees_repo=employees_repo,
        employee_service=EmployeeService(employees_repo, id_generator=id_generator),
        payroll_report_service=PayrollReportService(employees_repo),
        payroll_exporter=PayrollExcelExporter(),
    )
