"""
Batch comparison of schema file pairs.

Two run modes are supported:

- pair mode: two schema files, one comparison job
- manifest mode: two folders plus a listing file (`schema.lst`) in the second
  folder naming the schema files to compare, one per line

Every run writes into a freshly created report folder. Jobs run one after
another; the shared HTML assets are copied once, after the last job.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Any

from xsdiff.analyze.diff import ComparisonRecord, compare_models, summarize_records
from xsdiff.analyze.schema import SchemaAnalyzer
from xsdiff.exceptions import (
    DirectoryCreationConflict,
    InvalidInputError,
    MissingListingFile,
    XsDiffError,
)
from xsdiff.report.base import ReportWriter, safe_report_hint
from xsdiff.report.resources import ResourceBundler
from xsdiff.util.files import read_lines

logger = logging.getLogger(__name__)

LISTING_FILE = "schema.lst"
MINUTESTAMP = "%H%M"

FAIL_FAST = "fail_fast"
CONTINUE = "continue"
FAILURE_POLICIES = (FAIL_FAST, CONTINUE)


@dataclass(frozen=True)
class BatchJob:
    """One file pair to compare."""

    source_path: Path
    target_path: Path
    report_hint: str

    @property
    def header(self) -> str:
        return f"comparing: {self.source_path} with {self.target_path}"


@dataclass
class JobOutcome:
    """Result of one job: its comparison records, or the error that stopped it."""

    job: BatchJob
    records: list[ComparisonRecord] = field(default_factory=list)
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class RunResult:
    """Outcome of a complete batch run."""

    report_dir: Path
    manifest_mode: bool
    outcomes: list[JobOutcome] = field(default_factory=list)

    @property
    def failed_jobs(self) -> list[JobOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.succeeded]

    @property
    def succeeded(self) -> bool:
        return not self.failed_jobs


def read_listing(listing_file: Path) -> list[str]:
    """
    Read the listing file: one relative schema file name per line.

    Lines are used as-is; only blank lines are skipped.

    Raises:
        MissingListingFile: If the listing file does not exist
    """
    if not listing_file.is_file():
        raise MissingListingFile(listing_file)

    names = []
    for line_number, line in enumerate(read_lines(listing_file), start=1):
        if not line.strip():
            logger.warning(f"{listing_file}:{line_number}: skipping blank line")
            continue
        names.append(line)
    return names


def unique_report_hints(jobs: list[BatchJob]) -> list[BatchJob]:
    """
    Give every job a report hint that maps to its own report file.

    Listing entries such as `sub/a.xsd` and `sub_a.xsd`, or the same entry
    listed twice, would otherwise write to the same report file. Later
    colliding jobs get a numeric suffix: `sub_a.xsd-2`, `sub_a.xsd-3`, ...
    """
    taken: set[str] = set()
    unique = []
    for job in jobs:
        hint = job.report_hint
        counter = 1
        while safe_report_hint(hint) in taken:
            counter += 1
            hint = f"{job.report_hint}-{counter}"
        if hint != job.report_hint:
            logger.warning(f"{job.report_hint}: report name already used, writing as '{hint}'")
            job = replace(job, report_hint=hint)
        taken.add(safe_report_hint(hint))
        unique.append(job)
    return unique


def resolve_jobs(first: Path, second: Path, listing_name: str = LISTING_FILE) -> list[BatchJob]:
    """
    Turn run inputs into comparison jobs.

    Args:
        first: First schema file or folder
        second: Second schema file or folder (holds the listing file in manifest mode)
        listing_name: Listing file name looked up in `second`

    Returns:
        Jobs in listing order (a single job in pair mode); report hints
        are unique after path separators are flattened

    Raises:
        MissingListingFile: Folders given but `second` has no listing file
        InvalidInputError: Inputs are not two files or two folders
    """
    first = Path(first)
    second = Path(second)

    if first.is_dir() and second.is_dir():
        names = read_listing(second / listing_name)
        return unique_report_hints(
            [BatchJob(first / name, second / name, name) for name in names]
        )

    if first.is_file() and second.is_file():
        for path in (first, second):
            if path.suffix.lower() != ".xsd":
                logger.warning(f"{path} does not have .xsd extension")
        return [BatchJob(first, second, second.name)]

    raise InvalidInputError(first, second)


def default_report_dir(now: datetime) -> Path:
    """
    Default report folder name for a run started at `now`.

    Example:
        >>> default_report_dir(datetime(2024, 3, 9, 7, 5))
        PosixPath('report-2024-03-09-0705')
    """
    return Path(f"report-{now.date().isoformat()}-{now.strftime(MINUTESTAMP)}")


def create_report_dir(report_dir: Path) -> Path:
    """
    Create the report folder; it must not exist yet.

    Raises:
        DirectoryCreationConflict: If the folder exists or cannot be created
    """
    try:
        report_dir.mkdir()
    except OSError as e:
        raise DirectoryCreationConflict(report_dir, e) from e
    return report_dir


class BatchOrchestrator:
    """
    Run comparison jobs and hand their results to report writers.

    Failure policy applies to manifest mode only; pair mode always stops on error:
    - fail_fast: the first failing job aborts the run
    - continue: failing jobs are recorded and the remaining jobs still run

    Example:
        >>> orchestrator = BatchOrchestrator([HtmlReportWriter()], ResourceBundler())
        >>> result = orchestrator.run(Path("old"), Path("new"))
        >>> result.succeeded
        True
    """

    def __init__(
        self,
        writers: Sequence[ReportWriter],
        bundler: ResourceBundler | None = None,
        analyzer: SchemaAnalyzer | None = None,
        failure_policy: str = FAIL_FAST,
        listing_name: str = LISTING_FILE,
        clock: Callable[[], datetime] = datetime.now,
    ):
        if failure_policy not in FAILURE_POLICIES:
            raise ValueError(
                f"Unknown failure policy '{failure_policy}' "
                f"(expected one of: {', '.join(FAILURE_POLICIES)})"
            )
        self.writers = list(writers)
        self.bundler = bundler if bundler is not None else ResourceBundler()
        self.analyzer = analyzer if analyzer is not None else SchemaAnalyzer()
        self.failure_policy = failure_policy
        self.listing_name = listing_name
        self.clock = clock

    @classmethod
    def from_config(
        cls,
        config: dict[str, Any],
        writers: Sequence[ReportWriter],
        **kwargs: Any,
    ) -> "BatchOrchestrator":
        """Create an orchestrator from the `batch` and `analyzer` config sections."""
        batch = config.get("batch", {})
        kwargs.setdefault("analyzer", SchemaAnalyzer.from_config(config))
        kwargs.setdefault("failure_policy", batch.get("failure_policy", FAIL_FAST))
        kwargs.setdefault("listing_name", batch.get("listing_file", LISTING_FILE))
        return cls(writers, **kwargs)

    def run(self, first: Path, second: Path, report_dir: Path | None = None) -> RunResult:
        """
        Compare `first` with `second` and write reports into a new folder.

        Args:
            first: First schema file or folder
            second: Second schema file or folder
            report_dir: Report folder to create (default: report-<date>-<HHmm>)

        Returns:
            RunResult with one outcome per job

        Raises:
            MissingListingFile, InvalidInputError: Before anything is written
            DirectoryCreationConflict: Report folder exists or cannot be created
            ParseFailure: A schema cannot be parsed (pair mode, or fail_fast policy)
        """
        jobs = resolve_jobs(first, second, self.listing_name)
        manifest_mode = Path(first).is_dir()

        if report_dir is None:
            report_dir = default_report_dir(self.clock())
        create_report_dir(Path(report_dir))
        logger.info(f"output: to folder '{report_dir}'")

        result = RunResult(report_dir=Path(report_dir), manifest_mode=manifest_mode)
        for job in jobs:
            logger.info(f"compare: {job.report_hint}")
            try:
                records = self.run_job(job, result.report_dir)
            except (XsDiffError, OSError) as e:
                if not manifest_mode or self.failure_policy == FAIL_FAST:
                    raise
                logger.error(f"Failed to compare {job.source_path} with {job.target_path}: {e}")
                result.outcomes.append(JobOutcome(job, error=e))
                continue
            result.outcomes.append(JobOutcome(job, records=records))

        self.bundler.bundle(result.report_dir)
        return result

    def run_job(self, job: BatchJob, report_dir: Path) -> list[ComparisonRecord]:
        """Parse both sides of one job, compare them and write the reports."""
        first_model = self.analyzer.analyze(job.source_path)
        second_model = self.analyzer.analyze(job.target_path)
        records = compare_models(first_model, second_model)

        summary = summarize_records(records)
        logger.info(
            f"{job.report_hint}: {summary['types']} complex types analyzed, "
            f"{summary['with_differences']} with differences, "
            f"{summary['with_additions']} with additions"
        )

        columns = (job.source_path.name, job.target_path.name)
        for writer in self.writers:
            writer.start(report_dir, job.report_hint, columns)
            writer.write_header(job.header)
            writer.write_records(records)
            writer.finish()

        return records
