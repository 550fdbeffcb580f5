"""
Spreadsheet report generation.

One workbook per compared file pair, with a single sheet listing every
complex type and the members found on only one side.
"""

import logging
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from xsdiff.analyze.diff import ComparisonRecord
from xsdiff.report.base import ReportWriter
from xsdiff.util.files import atomic_path

logger = logging.getLogger(__name__)

SHEET_TITLE = "XSD Comparison"

# Column widths in characters
MIN_COLUMN_WIDTH = 12
MAX_COLUMN_WIDTH = 60

_THIN = Side(style="thin")
_BORDER = Border(top=_THIN, bottom=_THIN, left=_THIN, right=_THIN)
_HEADER_FONT = Font(bold=True, size=12)
_HEADER_FILL = PatternFill(start_color="ADD8E6", end_color="ADD8E6", fill_type="solid")
_HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center", wrap_text=True)
_CELL_ALIGNMENT = Alignment(vertical="top", wrap_text=True)


def build_workbook(columns: tuple[str, str], records: list[ComparisonRecord]) -> Workbook:
    """
    Build the comparison workbook.

    The header row is `NAME | <first> | <second>`; each following row holds a
    type name, what only the first schema has and what only the second has.
    """
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE

    header = ("NAME", *columns)
    for column_index, value in enumerate(header, start=1):
        cell = sheet.cell(row=1, column=column_index, value=value)
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL
        cell.border = _BORDER
        cell.alignment = _HEADER_ALIGNMENT

    for row_index, record in enumerate(records, start=2):
        values = (record.type_name, record.only_in_first, record.only_in_second)
        for column_index, value in enumerate(values, start=1):
            cell = sheet.cell(row=row_index, column=column_index, value=value or "")
            cell.border = _BORDER
            cell.alignment = _CELL_ALIGNMENT

    for column_index in range(1, len(header) + 1):
        longest = max(
            (len(str(cell.value or "")) for cell in sheet[get_column_letter(column_index)]),
            default=0,
        )
        sheet.column_dimensions[get_column_letter(column_index)].width = min(
            max(longest + 2, MIN_COLUMN_WIDTH), MAX_COLUMN_WIDTH
        )

    return workbook


class ExcelReportWriter(ReportWriter):
    """Writes `diff-report-<hint>.xlsx` files."""

    extension = "xlsx"

    def render(
        self,
        report_file: Path,
        headers: list[str],
        columns: tuple[str, str],
        records: list[ComparisonRecord],
    ) -> None:
        workbook = build_workbook(columns, records)
        with atomic_path(report_file) as tmp:
            workbook.save(tmp)
        logger.debug(f"xlsx: wrote {report_file}")
