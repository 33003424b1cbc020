from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator, to_decimal


@dataclass(frozen=True)
class PayrollRow:
    sno: int
    employee: Employee
    basic: float
    tax: float
    net: float


@dataclass(frozen=True)
class PayrollSummary:
    total_employees: int
    departments: int
    total_basic: float
    total_tax: float
    total_net: float
    average_salary: float


@dataclass(frozen=True)
class PayrollReport:
    rows: list[PayrollRow]
    summary: PayrollSummary
    generated_at: datetime


class PayrollReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()

    def build_report(self, *, now: Optional[datetime] = None) -> PayrollReport:
        return self.summarize(self._employees.read_all(), now=now)

    def summarize(self, employees: Sequence[Employee], *, now: Optional[datetime] = None) -> PayrollReport:
        rows: list[PayrollRow] = []
        total_basic = Decimal("0")
        total_tax = Decimal("0")
        total_net = Decimal("0")

        for i, emp in enumerate(employees, start=1):
            basic = to_decimal(emp.salary)
            tax = self._calculator.tax(basic)
            net = self._calculator.net(basic)

            # Totals add up the per-row rounded figures.
            total_basic += basic
            total_tax += tax
            total_net += net

            rows.append(PayrollRow(sno=i, employee=emp, basic=float(basic), tax=float(tax), net=float(net)))

        count = len(rows)
        average = total_basic / count if count else Decimal("0")

        summary = PayrollSummary(
            total_employees=count,
            departments=len({emp.department for emp in employees}),
            total_basic=float(total_basic),
            total_tax=float(total_tax),
            total_net=float(total_net),
            average_salary=float(average),
        )
        return PayrollReport(rows=rows, summary=summary, generated_at=now or datetime.now())
