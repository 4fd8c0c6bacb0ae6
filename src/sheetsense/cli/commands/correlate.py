"""Correlate command - correlation matrix or single-pair scatter regression."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table as RichTable

from sheetsense.analysis.correlation import (
    CorrelationMatrix,
    ScatterRegression,
    compute_correlation_matrix,
    compute_scatter_regression,
)
from sheetsense.cli.common import (
    JsonFlag,
    SourceArg,
    VerboseOption,
    console,
    fail,
    fmt_number,
    prepare,
    print_json,
    print_warnings,
)
from sheetsense.core.logging import log_context
from sheetsense.core.models.base import CorrelationStrength

STRENGTH_STYLES = {
    CorrelationStrength.STRONG: "bold green",
    CorrelationStrength.MODERATE: "green",
    CorrelationStrength.WEAK: "yellow",
    CorrelationStrength.NONE: "dim",
}


def correlate(
    source: SourceArg,
    x: Annotated[
        str | None,
        typer.Option("--x", help="X column for a scatter regression (requires --y)"),
    ] = None,
    y: Annotated[
        str | None,
        typer.Option("--y", help="Y column for a scatter regression (requires --x)"),
    ] = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Correlate numeric columns.

    Without --x/--y, prints the Pearson correlation matrix of all numeric
    columns. With both, prints the scatter regression for that pair.

    Examples:

        sheetsense correlate sales.csv

        sheetsense correlate sales.csv --x price --y quantity
    """
    if (x is None) != (y is None):
        console.print("[red]--x and --y must be given together[/red]")
        raise typer.Exit(2)

    table, settings = prepare(source, verbose)

    if x is not None and y is not None:
        with log_context(source=source.name):
            scatter = compute_scatter_regression(table, x, y)
        if not scatter.success:
            fail(scatter)
        if json_output:
            print_json(scatter.unwrap().model_dump(mode="json"))
        else:
            _print_scatter(scatter.unwrap())
            print_warnings(scatter)
        return

    with log_context(source=source.name):
        matrix = compute_correlation_matrix(
            table,
            sample_size=settings.correlation_sample_size,
            numeric_threshold=settings.correlation_numeric_threshold,
        )
    if not matrix.success:
        fail(matrix)
    if json_output:
        print_json(matrix.unwrap().model_dump(mode="json"))
    else:
        _print_matrix(matrix.unwrap())
        print_warnings(matrix)


def _print_matrix(matrix: CorrelationMatrix) -> None:
    rich_table = RichTable(title=f"Correlation matrix ({matrix.sample_size} rows)")
    rich_table.add_column("", style="cyan")
    for column in matrix.columns:
        rich_table.add_column(escape(column), justify="right")
    for row_column in matrix.columns:
        rich_table.add_row(
            escape(row_column),
            *(f"{matrix.get(row_column, c):.3f}" for c in matrix.columns),
        )
    console.print(rich_table)

    pairs = sorted(matrix.pairs(), key=lambda p: abs(p.r), reverse=True)
    if pairs:
        console.print("\n[bold]Pairs by strength[/bold]")
        for pair in pairs:
            style = STRENGTH_STYLES[pair.strength]
            console.print(
                f"  {escape(pair.column1)} ~ {escape(pair.column2)}: "
                f"[{style}]{pair.r:.3f} ({pair.strength.value})[/{style}]"
            )


def _print_scatter(scatter: ScatterRegression) -> None:
    style = STRENGTH_STYLES[scatter.strength]
    x_name = escape(scatter.x_column)
    y_name = escape(scatter.y_column)
    console.print(f"[bold]{x_name}[/bold] vs [bold]{y_name}[/bold]")
    console.print(f"  points:    {len(scatter.points)} ({scatter.excluded_rows} excluded)")
    console.print(f"  r:         [{style}]{scatter.r:.4f} ({scatter.strength.value})[/{style}]")
    console.print(f"  r squared: {scatter.r_squared:.4f}")
    if scatter.slope is not None and scatter.intercept is not None:
        slope = fmt_number(scatter.slope, 4)
        intercept = fmt_number(scatter.intercept, 4)
        console.print(f"  fit:       y = {slope} * x + {intercept}")
    if scatter.p_value is not None:
        console.print(f"  p-value:   {scatter.p_value:.4g}")
