"""Shared CLI utilities and constants."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from sheetsense.core.config import Settings, get_settings
from sheetsense.core.exceptions import SourceLoadError, TableStructureError
from sheetsense.core.logging import configure_logging
from sheetsense.core.models.base import Result
from sheetsense.core.table import ParsedTable
from sheetsense.sources import load_table

# Load .env file from current directory (for SHEETSENSE_* settings)
load_dotenv()

# Shared console instance
console = Console()

# Common type aliases for typer options
SourceArg = Annotated[
    Path,
    typer.Argument(
        help="CSV or JSON file to analyze",
        exists=True,
        dir_okay=False,
        file_okay=True,
        resolve_path=True,
    ),
]

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(
    verbosity: int = 0,
    log_format: str = "console",
    default_level: str = "WARNING",
) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=default_level, 1=INFO, 2+=DEBUG
        log_format: "console" for development, "json" for production/cloud
        default_level: Level used when no -v flag is given
    """
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = default_level

    configure_logging(
        log_level=level,
        log_format=log_format,
        show_timestamps=verbosity >= 1,
        color=log_format == "console",
    )


def prepare(source: Path, verbosity: int) -> tuple[ParsedTable, Settings]:
    """Configure logging and load the source table.

    Exits with code 1 when the file cannot be turned into a table.
    """
    settings = get_settings()
    setup_logging(verbosity, settings.log_format, settings.log_level)

    try:
        table = load_table(source)
    except (SourceLoadError, TableStructureError) as e:
        console.print(f"[red]Could not load {escape(str(source))}:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e
    return table, settings


def fail(result: Result[Any]) -> NoReturn:
    """Print a failed result and exit with code 1."""
    issue = f" ({result.issue.value})" if result.issue else ""
    console.print(f"[red]Error{issue}:[/red] {escape(result.error or 'analysis failed')}")
    raise typer.Exit(1)


def print_warnings(result: Result[Any]) -> None:
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")


def print_json(data: Any) -> None:
    console.print_json(data=data)


def fmt_number(value: float | None, digits: int = 2) -> str:
    """Format a number for table display."""
    if value is None:
        return "-"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.{digits}f}"
