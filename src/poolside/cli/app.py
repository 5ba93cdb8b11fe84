"""Poolside CLI application.

Usage:
    poolside time format 10235
    poolside time parse "1分05秒2"
    poolside time display 62.35
    poolside time check 2635
    poolside time batch times.txt
"""

from pathlib import Path

import typer
from dotenv import load_dotenv

# Load .env so TIME_MARKERS / MAX_TIME_SECONDS apply to the CLI too
load_dotenv()
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from poolside.codec import SwimTimeCodec, is_canonical, seconds_to_display
from poolside.config import get_settings
from poolside.services.time_batch import normalize_batch
from poolside.validation import TimeEntryError, validate_time_entry

console = Console()
app = typer.Typer(
    name="poolside",
    help="Swim club coaching tools",
    no_args_is_help=True,
)


def _codec() -> SwimTimeCodec:
    return SwimTimeCodec(get_settings().time_markers)


# =============================================================================
# TIME COMMANDS
# =============================================================================

time_app = typer.Typer(help="Swim time entry commands", no_args_is_help=True)
app.add_typer(time_app, name="time")


@time_app.command("format")
def time_format(raw: str = typer.Argument(..., help="Time as typed, e.g. 10235 or 1:05.2")):
    """Normalize a typed time to MM:SS.cc."""
    formatted = _codec().format(raw)
    if is_canonical(formatted):
        console.print(formatted)
    else:
        console.print(f"[yellow]{escape(formatted)}[/yellow] [dim](not a recognizable time)[/dim]")


@time_app.command("parse")
def time_parse(raw: str = typer.Argument(..., help="Time as typed")):
    """Convert a typed time to seconds."""
    codec = _codec()
    table = Table(title="Parsed Time")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Input", escape(raw))
    table.add_row("Formatted", escape(codec.format(raw)))
    table.add_row("Seconds", f"{codec.parse_seconds(raw):.2f}")

    console.print(table)


@time_app.command("display")
def time_display(seconds: float = typer.Argument(..., help="Stored time in seconds")):
    """Render stored seconds as MM:SS.cc."""
    try:
        console.print(seconds_to_display(seconds))
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None


@time_app.command("check")
def time_check(raw: str = typer.Argument(..., help="Time as typed")):
    """Check a typed time against the entry rules (exit 1 if refused)."""
    settings = get_settings()
    try:
        seconds = validate_time_entry(raw, max_seconds=settings.max_time_seconds, codec=_codec())
    except TimeEntryError as e:
        console.print(f"[red]{e.code.value}: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    console.print(f"[green]OK[/green] {seconds_to_display(seconds)} ({seconds:.2f}s)")


@time_app.command("batch")
def time_batch(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="One time per line"),
):
    """Normalize a file of typed times and report each line."""
    settings = get_settings()
    lines = file.read_text(encoding="utf-8").splitlines()
    result = normalize_batch(lines, max_seconds=settings.max_time_seconds, codec=_codec())

    table = Table(title=f"{file.name}: {result.row_count} times")
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Input")
    table.add_column("Formatted", style="cyan")
    table.add_column("Seconds", justify="right")
    table.add_column("Status")

    for row in result.rows:
        seconds = f"{row.time_seconds:.2f}" if row.time_seconds is not None else "-"
        status = "[green]ok[/green]" if row.ok else f"[red]{escape(row.error)}[/red]"
        table.add_row(str(row.row_number), escape(row.raw), escape(row.formatted), seconds, status)

    console.print(table)

    if not result.valid:
        console.print(f"[red]{len(result.failed)} of {result.row_count} times refused[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
