"""Chart command - aggregate measures per x-axis partition."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table as RichTable

from sheetsense.analysis.aggregation import ChartSeries, compute_chart_series, compute_pie_slices
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


def chart(
    source: SourceArg,
    x: Annotated[str, typer.Option("--x", help="Column whose values define the partitions")],
    measure: Annotated[
        list[str],
        typer.Option("--measure", "-m", help="Numeric column to aggregate (repeatable)"),
    ],
    group: Annotated[
        str | None,
        typer.Option("--group", "-g", help="Text column for a second partition level"),
    ] = None,
    percentage: Annotated[
        bool,
        typer.Option("--percentage", help="Show each partition's share of the measure total"),
    ] = False,
    pie: Annotated[
        bool,
        typer.Option("--pie", help="Also list the largest partitions of the first measure"),
    ] = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Aggregate numeric measures per value of an x column.

    Examples:

        sheetsense chart sales.csv --x region -m revenue

        sheetsense chart sales.csv --x region -m revenue --percentage

        sheetsense chart sales.csv --x region -m revenue --group channel --json
    """
    table, settings = prepare(source, verbose)

    with log_context(source=source.name):
        result = compute_chart_series(
            table,
            x,
            measure,
            group_column=group,
            percentage=percentage,
            max_partitions=settings.chart_max_partitions,
            sample_size=settings.type_sample_size,
            numeric_threshold=settings.type_numeric_threshold,
        )
    if not result.success:
        fail(result)

    series = result.unwrap()
    slices = (
        compute_pie_slices(series, use_percentage=series.percentage, limit=settings.pie_max_slices)
        if pie
        else []
    )

    if json_output:
        output = {
            "x_column": series.x_column,
            "measure_columns": series.measure_columns,
            "group_column": series.group_column,
            "series_keys": series.series_keys,
            "total_partitions": series.total_partitions,
            "truncated": series.truncated,
            "records": series.to_records(),
        }
        if pie:
            output["pie"] = [s.model_dump() for s in slices]
        print_json(output)
        return

    _print_series(series)
    if slices:
        first_measure = escape(series.measure_columns[0])
        pie_table = RichTable(title=f"Largest partitions of {first_measure}")
        pie_table.add_column("Partition", style="cyan")
        pie_table.add_column("Value", justify="right")
        for s in slices:
            pie_table.add_row(escape(s.name), fmt_number(s.value))
        console.print(pie_table)
    print_warnings(result)


def _print_series(series: ChartSeries) -> None:
    measures = escape(", ".join(series.measure_columns))
    rich_table = RichTable(title=f"{measures} by {escape(series.x_column)}")
    rich_table.add_column(escape(series.x_column), style="cyan")

    if series.grouped:
        for key in series.series_keys:
            rich_table.add_column(f"{escape(key)} (mean)", justify="right")
        for point in series.points:
            cells = [
                fmt_number(point.measures[key].mean) if key in point.measures else "-"
                for key in series.series_keys
            ]
            rich_table.add_row(escape(point.group_key), *cells)
        console.print(rich_table)
        return

    rich_table.add_column("Rows", justify="right")
    for m in series.measure_columns:
        rich_table.add_column(f"{escape(m)} (mean)", justify="right")
        rich_table.add_column(f"{escape(m)} (sum)", justify="right")
        if series.percentage:
            rich_table.add_column(f"{escape(m)} (%)", justify="right")
    for point in series.points:
        cells = [str(point.count)]
        for m in series.measure_columns:
            aggregate = point.measures[m]
            cells.append(fmt_number(aggregate.mean))
            cells.append(fmt_number(aggregate.sum))
            if series.percentage:
                cells.append(fmt_number(aggregate.percentage, 1))
        rich_table.add_row(escape(point.group_key), *cells)
    console.print(rich_table)
