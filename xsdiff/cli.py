"""
CLI entry point for xsdiff.
"""

import logging
from functools import wraps
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from xsdiff.batch import CONTINUE, BatchOrchestrator, RunResult
from xsdiff.config import load_config
from xsdiff.exceptions import XsDiffError, format_error_for_cli
from xsdiff.report import WRITERS, build_writers
from xsdiff.util.progress import operation_status, show_summary

app = typer.Typer(
    name="xsdiff",
    help="Compare XML Schema documents, or folders of them, and report complex type differences.",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr; INFO by default, DEBUG with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def handle_errors(func):
    """Decorator to handle exceptions in CLI commands with nice formatting."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except XsDiffError as e:
            console.print(format_error_for_cli(e))
            raise typer.Exit(1)
        except Exception as e:
            logger.exception("Unexpected error")
            console.print(f"[red]Unexpected error:[/red] {str(e)}")
            raise typer.Exit(1)

    return wrapper


def _print_run_result(result: RunResult) -> None:
    table = Table(title=f"Reports in {result.report_dir}")
    table.add_column("Schema", style="cyan")
    table.add_column("Types", justify="right")
    table.add_column("Differences", justify="right")
    table.add_column("Additions", justify="right")
    table.add_column("Status")

    for outcome in result.outcomes:
        if outcome.succeeded:
            records = outcome.records
            table.add_row(
                outcome.job.report_hint,
                str(len(records)),
                str(sum(1 for r in records if r.has_differences)),
                str(sum(1 for r in records if r.has_additions)),
                "[green]ok[/green]",
            )
        else:
            table.add_row(outcome.job.report_hint, "-", "-", "-", "[red]failed[/red]")

    console.print(table)

    if result.manifest_mode:
        show_summary(
            "Summary",
            {
                "Compared": len(result.outcomes),
                "Failed": len(result.failed_jobs),
                "Report folder": str(result.report_dir),
            },
            out=console,
        )


@app.command()
@handle_errors
def compare(
    first: Path = typer.Argument(..., help="First schema file, or folder of schemas"),
    second: Path = typer.Argument(
        ..., help="Second schema file, or folder of schemas containing schema.lst"
    ),
    report_folder: Path | None = typer.Argument(
        None, help="Report output folder (default: report-<date>-<HHmm>)"
    ),
    formats: list[str] | None = typer.Option(
        None, "--format", "-f", help="Report format (html|xlsx), repeatable"
    ),
    config: Path | None = typer.Option(
        None, "--config", help="Configuration file (default: ./xsdiff.yaml if present)"
    ),
    preset: str | None = typer.Option(
        None, "--preset", help="Recognised constructs: full (default) or basic"
    ),
    continue_on_error: bool = typer.Option(
        False, "--continue-on-error", help="In folder mode, keep going when a schema fails"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Compare two schemas or two folders of schemas.

    When comparing folders, a schema.lst listing file must exist in the second
    folder, naming one schema file per line.

    Example:
        xsdiff old/customer.xsd new/customer.xsd
        xsdiff old-schemas new-schemas my-report
    """
    configure_logging(verbose)

    settings = load_config(config)
    if preset is not None:
        if preset not in ("full", "basic"):
            console.print(f"[red]Error: Unknown preset '{preset}'. Use 'full' or 'basic'.[/red]")
            raise typer.Exit(1)
        settings["analyzer"]["preset"] = preset
        settings["analyzer"].pop("constructs", None)
    if continue_on_error:
        settings["batch"]["failure_policy"] = CONTINUE

    selected_formats = formats or settings["report"]["formats"]
    unsupported = [fmt for fmt in selected_formats if fmt not in WRITERS]
    if unsupported:
        console.print(
            f"[red]Error: Unsupported format '{unsupported[0]}'. "
            f"Supported: {', '.join(WRITERS)}.[/red]"
        )
        raise typer.Exit(1)

    orchestrator = BatchOrchestrator.from_config(settings, build_writers(selected_formats))

    with operation_status("Comparing schemas", out=console):
        result = orchestrator.run(first, second, report_folder)

    _print_run_result(result)

    if not result.succeeded:
        for outcome in result.failed_jobs:
            console.print(format_error_for_cli(outcome.error))
        raise typer.Exit(1)

    console.print("done")


if __name__ == "__main__":
    app()
