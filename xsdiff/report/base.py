"""
Report writer interface.

The batch orchestrator drives one writer session per comparison job:

    writer.start(report_dir, hint, columns)
    writer.write_header("comparing: a.xsd with b.xsd")
    writer.write_records(records)
    writer.finish()

Writers buffer everything until finish(), which writes the report file in
one step.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from xsdiff.analyze.diff import ComparisonRecord

REPORT_PREFIX = "diff-report-"


def safe_report_hint(hint: str) -> str:
    """Replace path separators so that every report lands directly in the report folder."""
    return re.sub(r"[\\/]", "_", hint)


def report_file_name(hint: str, extension: str) -> str:
    """
    Build a report file name from a job hint.

    Example:
        >>> report_file_name("orders/v2.xsd", "html")
        'diff-report-orders_v2.xsd.html'
    """
    return f"{REPORT_PREFIX}{safe_report_hint(hint)}.{extension}"


class ReportWriter(ABC):
    """Base class for comparison report writers."""

    extension: str = ""

    def __init__(self):
        self._report_file: Path | None = None
        self._columns: tuple[str, str] = ("first", "second")
        self._headers: list[str] = []
        self._records: list[ComparisonRecord] = []

    @property
    def active(self) -> bool:
        return self._report_file is not None

    def start(
        self, report_dir: Path, hint: str, columns: tuple[str, str] = ("first", "second")
    ) -> None:
        """Open a writer session for one job."""
        if self.active:
            raise RuntimeError(f"Report session already open: {self._report_file}")
        self._report_file = Path(report_dir) / report_file_name(hint, self.extension)
        self._columns = columns
        self._headers = []
        self._records = []

    def write_header(self, text: str) -> None:
        self._require_session()
        self._headers.append(text)

    def write_records(self, records: Iterable[ComparisonRecord]) -> None:
        self._require_session()
        self._records.extend(records)

    def finish(self) -> Path:
        """Write the buffered report and close the session."""
        self._require_session()
        report_file = self._report_file
        try:
            self.render(report_file, self._headers, self._columns, self._records)
        finally:
            self._report_file = None
        return report_file

    def _require_session(self) -> None:
        if not self.active:
            raise RuntimeError("No report session open; call start() first")

    @abstractmethod
    def render(
        self,
        report_file: Path,
        headers: list[str],
        columns: tuple[str, str],
        records: list[ComparisonRecord],
    ) -> None:
        """Write the complete report file."""
