"""CLI entry point for Console Drills."""

import logging
import math
import random
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_MAX_TEMP, DEFAULT_MIN_TEMP, DEFAULT_UNIT
from .output import make_console
from .sources import ConsoleLineSource, FileLineSource
from .tables import run_table_tool
from .temps import DailyTempsApp, TemperatureStatistics, TemperatureValidator

app = typer.Typer(
    name="console-drills",
    help="Log daily temperatures or practice multiplication tables.",
    add_completion=False,
)
console = make_console()


def setup_logging(verbose: bool) -> None:
    """Send debug logs to stderr so they never mix with the transcript."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def temps(
    min_temp: float = typer.Option(
        DEFAULT_MIN_TEMP,
        "--min",
        help="Lowest accepted temperature (inclusive)",
    ),
    max_temp: float = typer.Option(
        DEFAULT_MAX_TEMP,
        "--max",
        help="Highest accepted temperature (inclusive)",
    ),
    unit: str = typer.Option(
        DEFAULT_UNIT,
        "--unit",
        help="Unit named in the out-of-range notice",
    ),
    input_file: Optional[str] = typer.Option(
        None,
        "--input-file",
        "-i",
        help="Read temperatures from a file, one per line, instead of the keyboard",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each accepted and rejected entry to stderr",
    ),
) -> None:
    """Enter temperatures until 'q', then see the count and average."""
    setup_logging(verbose)

    if not (math.isfinite(min_temp) and math.isfinite(max_temp)):
        console.print(f"[red]--min ({min_temp}) and --max ({max_temp}) must be finite numbers[/red]", markup=True)
        raise typer.Exit(1)

    if min_temp > max_temp:
        console.print(f"[red]--min ({min_temp}) must not exceed --max ({max_temp})[/red]", markup=True)
        raise typer.Exit(1)

    validator = TemperatureValidator(min=min_temp, max=max_temp)
    stats = TemperatureStatistics()

    if input_file:
        input_path = Path(input_file)
        if not input_path.exists():
            console.print(f"[red]File not found: {input_file}[/red]", markup=True)
            raise typer.Exit(1)
        with FileLineSource.from_path(input_path) as source:
            DailyTempsApp(source, validator, stats, console, unit=unit).run()
    else:
        DailyTempsApp(ConsoleLineSource(console), validator, stats, console, unit=unit).run()


@app.command()
def table(
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for the practice question, for repeatable sessions",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log the resolved size and quiz outcome to stderr",
    ),
) -> None:
    """Print a multiplication table and optionally answer a practice question."""
    setup_logging(verbose)
    run_table_tool(ConsoleLineSource(console), console, random.Random(seed))


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"console-drills version {__version__}")


if __name__ == "__main__":
    app()
