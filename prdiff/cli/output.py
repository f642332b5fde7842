"""Rich-based output utilities for the prdiff CLI."""

from collections import Counter
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from prdiff.diff import DiffRecord, get_file_extension

# Shared console instance
console = Console()


def print_record(record: DiffRecord, show_body: bool = True) -> None:
    """Print one file's header line and, optionally, its diff body."""
    console.print(
        f"[bold]{escape(record.old_path)}[/bold] -> [bold]{escape(record.new_path)}[/bold] "
        f"[dim](index: {escape(record.index)})[/dim]",
        highlight=False,
    )
    if show_body:
        console.print(Syntax(record.body, "diff", theme="ansi_dark", word_wrap=True))
    console.print()


def print_summary(records: Sequence[DiffRecord], dropped: int = 0) -> None:
    """Print a per-extension count of the files shown."""
    counts = Counter(get_file_extension(r.path) or "(none)" for r in records)

    table = Table(title=f"{len(records)} file(s)", show_edge=False)
    table.add_column("Extension")
    table.add_column("Files", justify="right")
    for ext, count in counts.most_common():
        table.add_row(escape(ext), str(count))
    console.print(table)

    if dropped:
        print_info(f"{dropped} segment(s) could not be parsed")


def print_error(message: str) -> None:
    """Print an error message in red.

    Args:
        message: The error message to display.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an informational message.

    Args:
        message: The info message to display.
    """
    console.print(f"[dim]{message}[/dim]")
