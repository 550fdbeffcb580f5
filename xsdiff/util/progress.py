"""
Progress and summary output utilities using rich.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


@contextmanager
def operation_status(operation: str, out: Console | None = None) -> Iterator[None]:
    """
    Context manager showing a spinner while an operation runs.

    Usage:
        with operation_status("Comparing schemas"):
            # do work
            pass

    Args:
        operation: Description of the operation
        out: Console to print to (defaults to the module console)

    Yields:
        None
    """
    out = out or console
    with out.status(f"[bold blue]{operation}...[/bold blue]"):
        try:
            yield
        except Exception:
            # The caller reports the error itself
            out.print(f"[red]✗ {operation} failed[/red]")
            raise
    out.print(f"[green]✓ {operation} complete[/green]")


def show_summary(title: str, items: dict[str, str | int], out: Console | None = None) -> None:
    """
    Show a formatted summary box.

    Args:
        title: Summary title
        items: Dictionary of items to show (key: value pairs)
        out: Console to print to (defaults to the module console)
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in items.items():
        table.add_row(key, str(value))

    panel = Panel(table, title=f"[bold]{title}[/bold]", border_style="blue")
    (out or console).print(panel)
