"""
Report generation for xsdiff.
"""

from collections.abc import Iterable

from xsdiff.report.base import ReportWriter, report_file_name
from xsdiff.report.excel import ExcelReportWriter
from xsdiff.report.html import HtmlReportWriter
from xsdiff.report.resources import HTML_RESOURCES, ResourceBundler

WRITERS: dict[str, type[ReportWriter]] = {
    "html": HtmlReportWriter,
    "xlsx": ExcelReportWriter,
}


def build_writers(formats: Iterable[str]) -> list[ReportWriter]:
    """Instantiate one writer per requested format (html, xlsx)."""
    writers = []
    for fmt in formats:
        if fmt not in WRITERS:
            raise ValueError(f"Unsupported report format '{fmt}' (supported: {', '.join(WRITERS)})")
        writers.append(WRITERS[fmt]())
    return writers


__all__ = [
    "HTML_RESOURCES",
    "ExcelReportWriter",
    "HtmlReportWriter",
    "ReportWriter",
    "ResourceBundler",
    "build_writers",
    "report_file_name",
]
