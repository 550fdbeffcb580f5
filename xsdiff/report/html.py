"""
HTML report generation.

Renders one static HTML page per compared file pair. Pages link the shared
stylesheet and script copied into the report folder by the resource bundler.
"""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from xsdiff.analyze.diff import ComparisonRecord, summarize_records
from xsdiff.report.base import ReportWriter
from xsdiff.report.resources import HTML_RESOURCES, RESOURCE_ROOT
from xsdiff.util.files import write_text

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "diff-report.html.j2"


def build_report_context(
    headers: list[str], columns: tuple[str, str], records: list[ComparisonRecord]
) -> dict[str, Any]:
    """
    Build data context for the report template.

    Returns:
        Dictionary with report data:
        - headers: file comparison header lines
        - columns: display names of the first and second schema
        - rows: one dict per record with type, sides and row status
        - summary: counts from summarize_records
        - stylesheets / scripts: relative asset paths
    """
    rows = []
    for record in records:
        if record.has_additions:
            status = "added"
        elif record.has_differences:
            status = "changed"
        else:
            status = "same"
        rows.append(
            {
                "type_name": record.type_name,
                "only_in_first": record.only_in_first,
                "only_in_second": record.only_in_second,
                "status": status,
            }
        )

    return {
        "headers": headers,
        "columns": columns,
        "rows": rows,
        "summary": summarize_records(records),
        "stylesheets": [r for r in HTML_RESOURCES if r.endswith(".css")],
        "scripts": [r for r in HTML_RESOURCES if r.endswith(".js")],
    }


def render_report_template(context: dict[str, Any], template_dir: Path = RESOURCE_ROOT) -> str:
    """
    Render HTML template with report context.

    Args:
        context: Report data dict
        template_dir: Directory holding the Jinja2 template

    Returns:
        Rendered HTML string
    """
    env = Environment(loader=FileSystemLoader(str(template_dir)), autoescape=True)
    template = env.get_template(TEMPLATE_NAME)
    return template.render(**context)


class HtmlReportWriter(ReportWriter):
    """Writes `diff-report-<hint>.html` files."""

    extension = "html"

    def __init__(self, template_dir: Path = RESOURCE_ROOT):
        super().__init__()
        self.template_dir = template_dir

    def render(
        self,
        report_file: Path,
        headers: list[str],
        columns: tuple[str, str],
        records: list[ComparisonRecord],
    ) -> None:
        context = build_report_context(headers, columns, records)
        write_text(report_file, render_report_template(context, self.template_dir))
        logger.debug(f"html: wrote {report_file}")
