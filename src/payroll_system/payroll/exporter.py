"""Excel payroll report.

Data goes in through pandas (``DataFrame.to_excel`` on an openpyxl-backed
``ExcelWriter``); the layout and styling are applied afterwards on the
openpyxl worksheets.
"""
from __future__ import annotations

import io
import logging
from datetime import datetime
from typing import Optional

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ..common.datetime_utils import parse_iso_date
from .service import PayrollReport

logger = logging.getLogger(__name__)

PAYROLL_SHEET = "Employee Payroll"
SUMMARY_SHEET = "Summary"

HEADERS = [
    "#",
    "Employee Name",
    "Gender",
    "Department",
    "Basic Salary (₹)",
    "Tax 12% (₹)",
    "Net Salary (₹)",
    "Start Date",
]
COLUMN_WIDTHS = [6, 24, 10, 18, 20, 20, 20, 16]
MONEY_COLUMNS = (5, 6, 7)
DATE_COLUMN = 8

# Rows are 1-based in openpyxl; pandas ``startrow`` is 0-based.
HEADER_ROW = 4
FIRST_DATA_ROW = HEADER_ROW + 1

MONEY_FMT = "₹#,##0.00"
DATE_FMT = "DD-MMM-YYYY"

INDIGO_DARK = "FF312E81"
INDIGO_MED = "FF3730A3"
INDIGO_LIGHT = "FFEEF2FF"
INDIGO_ACCENT = "FF6366F1"
WHITE = "FFFFFFFF"
RED = "FFC0392B"
GREEN = "FF0F9D58"
ROW_ALT = "FFF5F3FF"
GRID = "FFE0E0E0"
INK = "FF111827"

FONT_NAME = "Arial"

H_CENTER = Alignment(horizontal="center", vertical="center")
H_RIGHT = Alignment(horizontal="right", vertical="center")
H_LEFT = Alignment(horizontal="left", vertical="center")


def _fill(argb: str) -> PatternFill:
    return PatternFill(fill_type="solid", fgColor=argb)


def _excel_date(value: Optional[str]):
    """Real date cell when the stored text is ISO, the raw text otherwise."""
    if not value:
        return None
    try:
        return datetime.combine(parse_iso_date(value), datetime.min.time())
    except ValueError:
        return value


class PayrollExcelExporter:
    def __init__(self, *, creator: str = "Employee Payroll System"):
        self._creator = creator

    @staticmethod
    def filename(now: Optional[datetime] = None) -> str:
        return f"payroll-export-{(now or datetime.now()).strftime('%Y-%m-%d')}.xlsx"

    def export(self, report: PayrollReport) -> bytes:
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            self._write_payroll_sheet(writer, report)
            self._write_summary_sheet(writer, report)
            writer.book.properties.creator = self._creator
            writer.book.properties.created = report.generated_at

        logger.info("Exported payroll workbook with %d employee(s)", report.summary.total_employees)
        return out.getvalue()

    def _write_payroll_sheet(self, writer: pd.ExcelWriter, report: PayrollReport) -> None:
        df = pd.DataFrame(
            [
                [
                    r.sno,
                    r.employee.name,
                    r.employee.gender,
                    r.employee.department,
                    r.basic,
                    r.tax,
                    r.net,
                    _excel_date(r.employee.start_date),
                ]
                for r in report.rows
            ],
            columns=HEADERS,
        )
        df.to_excel(writer, sheet_name=PAYROLL_SHEET, index=False, startrow=HEADER_ROW - 1)

        ws = writer.sheets[PAYROLL_SHEET]
        ws.page_setup.orientation = ws.ORIENTATION_LANDSCAPE
        ws.page_setup.paperSize = ws.PAPERSIZE_A4
        ws.sheet_properties.pageSetUpPr.fitToPage = True
        for idx, width in enumerate(COLUMN_WIDTHS, start=1):
            ws.column_dimensions[get_column_letter(idx)].width = width

        last_col = get_column_letter(len(HEADERS))
        ws.merge_cells(f"A1:{last_col}1")
        title = ws["A1"]
        title.value = "Employee Payroll Report"
        title.font = Font(name=FONT_NAME, size=16, bold=True, color=WHITE)
        title.fill = _fill(INDIGO_MED)
        title.alignment = H_CENTER
        ws.row_dimensions[1].height = 42

        ws.merge_cells(f"A2:{last_col}2")
        subtitle = ws["A2"]
        today = report.generated_at.strftime("%d %B %Y")
        subtitle.value = f"Generated on {today}   •   Total Employees: {report.summary.total_employees}"
        subtitle.font = Font(name=FONT_NAME, size=10, italic=True, color=INDIGO_ACCENT)
        subtitle.fill = _fill(INDIGO_LIGHT)
        subtitle.alignment = H_CENTER
        ws.row_dimensions[2].height = 22

        ws.row_dimensions[HEADER_ROW].height = 28
        for cell in ws[HEADER_ROW]:
            cell.font = Font(name=FONT_NAME, size=10, bold=True, color=WHITE)
            cell.fill = _fill(INDIGO_DARK)
            cell.alignment = H_CENTER
            cell.border = Border(bottom=Side(style="medium", color=INDIGO_ACCENT))

        thin = Side(style="thin", color=GRID)
        for offset in range(len(report.rows)):
            row_idx = FIRST_DATA_ROW + offset
            ws.row_dimensions[row_idx].height = 22
            fill = _fill(WHITE if offset % 2 == 0 else ROW_ALT)
            for col in range(1, len(HEADERS) + 1):
                cell = ws.cell(row=row_idx, column=col)
                cell.fill = fill
                cell.border = Border(bottom=thin, right=thin)
                cell.font = Font(name=FONT_NAME, size=10)
                cell.alignment = H_LEFT if col <= 2 else H_CENTER if col == DATE_COLUMN else H_RIGHT
            for col in MONEY_COLUMNS:
                ws.cell(row=row_idx, column=col).number_format = MONEY_FMT
            ws.cell(row=row_idx, column=DATE_COLUMN).number_format = DATE_FMT
            ws.cell(row=row_idx, column=6).font = Font(name=FONT_NAME, size=10, color=RED)
            ws.cell(row=row_idx, column=7).font = Font(name=FONT_NAME, size=10, bold=True, color=GREEN)

        s = report.summary
        ws.append([None, "TOTALS", None, None, s.total_basic, s.total_tax, s.total_net, None])
        totals_idx = ws.max_row
        ws.row_dimensions[totals_idx].height = 28
        for col in range(1, len(HEADERS) + 1):
            cell = ws.cell(row=totals_idx, column=col)
            cell.fill = _fill(INDIGO_DARK)
            cell.font = Font(name=FONT_NAME, size=10, bold=True, color=WHITE)
            cell.alignment = H_LEFT if col == 2 else H_RIGHT
            cell.border = Border(top=Side(style="medium", color=INDIGO_ACCENT))
        for col in MONEY_COLUMNS:
            ws.cell(row=totals_idx, column=col).number_format = MONEY_FMT

    def _write_summary_sheet(self, writer: pd.ExcelWriter, report: PayrollReport) -> None:
        s = report.summary
        items = [
            ("Total Employees", s.total_employees, None),
            ("Active Departments", s.departments, None),
            ("Total Basic Salary", s.total_basic, MONEY_FMT),
            ("Total Tax (12%)", s.total_tax, MONEY_FMT),
            ("Total Net Salary", s.total_net, MONEY_FMT),
            ("Average Basic Salary", s.average_salary, MONEY_FMT),
        ]
        df = pd.DataFrame([(label, value) for label, value, _ in items], dtype=object)
        df.to_excel(writer, sheet_name=SUMMARY_SHEET, index=False, header=False, startrow=1)

        ws: Worksheet = writer.sheets[SUMMARY_SHEET]
        ws.column_dimensions["A"].width = 28
        ws.column_dimensions["B"].width = 22

        ws.merge_cells("A1:B1")
        title = ws["A1"]
        title.value = "Payroll Summary"
        title.font = Font(name=FONT_NAME, size=14, bold=True, color=WHITE)
        title.fill = _fill(INDIGO_MED)
        title.alignment = H_CENTER
        ws.row_dimensions[1].height = 36

        bottom = Border(bottom=Side(style="thin", color=GRID))
        for row_idx, (_, _, fmt) in enumerate(items, start=2):
            ws.row_dimensions[row_idx].height = 26
            label = ws.cell(row=row_idx, column=1)
            value = ws.cell(row=row_idx, column=2)
            label.fill = _fill(INDIGO_LIGHT)
            label.font = Font(name=FONT_NAME, size=10, bold=True, color=INDIGO_DARK)
            label.alignment = H_LEFT
            value.font = Font(name=FONT_NAME, size=10, color=INK)
            value.alignment = H_RIGHT
            if fmt:
                value.number_format = fmt
            label.border = bottom
            value.border = bottom
