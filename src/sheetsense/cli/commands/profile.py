"""Profile and stats commands - column types and descriptive statistics."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table as RichTable

from sheetsense.analysis.statistics import compute_descriptive_statistics
from sheetsense.analysis.typing import get_column_profiles
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


def profile(
    source: SourceArg,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Classify each column as numeric or text.

    Examples:

        sheetsense profile sales.csv

        sheetsense profile reviews.json --json
    """
    table, settings = prepare(source, verbose)

    with log_context(source=source.name):
        result = get_column_profiles(
            table,
            sample_size=settings.type_sample_size,
            numeric_threshold=settings.type_numeric_threshold,
        )
    if not result.success:
        fail(result)

    profiles = result.unwrap()
    if json_output:
        print_json([p.model_dump(mode="json") for p in profiles])
        return

    rich_table = RichTable(title=f"Columns of {escape(source.name)} ({table.row_count} rows)")
    rich_table.add_column("Column", style="cyan")
    rich_table.add_column("Kind")
    rich_table.add_column("Numeric ratio", justify="right")
    rich_table.add_column("Sampled", justify="right")
    for p in profiles:
        kind_style = "green" if p.is_numeric else "yellow"
        rich_table.add_row(
            escape(p.name),
            f"[{kind_style}]{p.kind.value}[/{kind_style}]",
            f"{p.numeric_ratio:.0%}",
            str(p.sampled),
        )
    console.print(rich_table)


def stats(
    source: SourceArg,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Show descriptive statistics for every column.

    Numeric columns get count, min, max, sum, mean, median, mode and
    population standard deviation; text columns get distinct count and the
    most frequent value.
    """
    table, settings = prepare(source, verbose)

    with log_context(source=source.name):
        result = compute_descriptive_statistics(
            table,
            sample_size=settings.statistics_sample_size,
            numeric_threshold=settings.type_numeric_threshold,
        )
    if not result.success:
        fail(result)

    statistics = result.unwrap()
    if json_output:
        print_json(statistics.model_dump(mode="json"))
        return

    console.print(
        f"[bold]{escape(source.name)}[/bold]: {statistics.total_rows} rows, "
        f"{statistics.total_columns} columns"
    )

    if statistics.numeric:
        numeric_table = RichTable(title="Numeric columns")
        numeric_table.add_column("Column", style="cyan")
        for header in ("Count", "Min", "Max", "Sum", "Mean", "Median", "Mode", "Std"):
            numeric_table.add_column(header, justify="right")
        for name, s in statistics.numeric.items():
            numeric_table.add_row(
                escape(name),
                str(s.count),
                fmt_number(s.min),
                fmt_number(s.max),
                fmt_number(s.sum),
                fmt_number(s.mean),
                fmt_number(s.median),
                fmt_number(s.mode),
                fmt_number(s.std),
            )
        console.print(numeric_table)

    if statistics.text:
        text_table = RichTable(title="Text columns")
        text_table.add_column("Column", style="cyan")
        text_table.add_column("Count", justify="right")
        text_table.add_column("Distinct", justify="right")
        text_table.add_column("Most frequent")
        for name, t in statistics.text.items():
            text_table.add_row(
                escape(name),
                str(t.count),
                str(t.unique_count),
                f"{escape(t.mode_value)} ({t.frequency[t.mode_value]})",
            )
        console.print(text_table)

    print_warnings(result)
