"""Words and sentiment commands - text analytics on one column."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table as RichTable

from sheetsense.analysis.text import (
    COLOR_SCHEMES,
    Lexicon,
    compute_sentiment_breakdown,
    compute_word_frequency,
    find_text_columns,
    layout_word_cloud,
    load_lexicon,
)
from sheetsense.cli.common import (
    JsonFlag,
    SourceArg,
    VerboseOption,
    console,
    fail,
    prepare,
    print_json,
)
from sheetsense.core.config import Settings
from sheetsense.core.logging import log_context
from sheetsense.core.models.base import SentimentLabel
from sheetsense.core.table import ParsedTable

LABEL_STYLES = {
    SentimentLabel.POSITIVE: "green",
    SentimentLabel.NEGATIVE: "red",
    SentimentLabel.NEUTRAL: "dim",
}

ColumnOption = Annotated[
    str | None,
    typer.Option(
        "--column",
        "-c",
        help="Text column to analyze (default: first column that looks like text)",
    ),
]


def _resolve_column(table: ParsedTable, column: str | None, min_length: int) -> str:
    if column is not None:
        return column
    candidates = find_text_columns(table, min_length=min_length)
    if not candidates:
        console.print("[red]No text column found; pass --column explicitly[/red]")
        raise typer.Exit(1)
    return candidates[0]


def _lexicon(settings: Settings) -> Lexicon:
    return load_lexicon(settings.lexicon_path)


def words(
    source: SourceArg,
    column: ColumnOption = None,
    top: Annotated[
        int | None,
        typer.Option("--top", "-n", help="Number of words to show"),
    ] = None,
    cloud: Annotated[
        bool,
        typer.Option("--cloud", help="Lay the words out as a word cloud (JSON output)"),
    ] = False,
    scheme: Annotated[
        str,
        typer.Option("--scheme", help=f"Word cloud colors: {', '.join(COLOR_SCHEMES)}"),
    ] = "default",
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for a reproducible word cloud"),
    ] = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Rank the most frequent words of a text column.

    Examples:

        sheetsense words reviews.json --column comment

        sheetsense words reviews.json -c comment --cloud --seed 7
    """
    table, settings = prepare(source, verbose)
    column = _resolve_column(table, column, settings.word_cloud_min_text_length)

    with log_context(source=source.name, column=column):
        result = compute_word_frequency(
            table,
            column,
            top_n=top if top is not None else settings.word_frequency_top_n,
            lexicon=_lexicon(settings),
        )
    if not result.success:
        fail(result)

    frequencies = result.unwrap()
    if cloud:
        placed = layout_word_cloud(
            frequencies,
            width=settings.word_cloud_width,
            height=settings.word_cloud_height,
            color_scheme=scheme,
            seed=seed,
        )
        print_json(
            {
                "column": column,
                "width": settings.word_cloud_width,
                "height": settings.word_cloud_height,
                "words": [asdict(word) for word in placed],
            }
        )
        return

    if json_output:
        print_json(frequencies.model_dump(mode="json"))
        return

    if not frequencies.entries:
        console.print(f"[yellow]No words found in {escape(column)}[/yellow]")
        return

    rich_table = RichTable(
        title=f"Top words in {escape(column)} ({frequencies.distinct_tokens} distinct, "
        f"{frequencies.total_tokens} total)"
    )
    rich_table.add_column("#", justify="right", style="dim")
    rich_table.add_column("Word", style="cyan")
    rich_table.add_column("Count", justify="right")
    for rank, entry in enumerate(frequencies.entries, start=1):
        rich_table.add_row(str(rank), entry.token, str(entry.count))
    console.print(rich_table)


def sentiment(
    source: SourceArg,
    column: ColumnOption = None,
    rows: Annotated[
        int,
        typer.Option("--rows", help="Number of scored rows to list"),
    ] = 20,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Score each text cell of a column with the sentiment lexicon.

    Examples:

        sheetsense sentiment reviews.json --column comment

        sheetsense sentiment reviews.json -c comment --json
    """
    table, settings = prepare(source, verbose)
    column = _resolve_column(table, column, settings.sentiment_min_text_length)

    with log_context(source=source.name, column=column):
        result = compute_sentiment_breakdown(table, column, lexicon=_lexicon(settings))
    if not result.success:
        fail(result)

    breakdown = result.unwrap()
    if json_output:
        print_json(breakdown.model_dump(mode="json"))
        return

    summary = breakdown.summary
    console.print(f"[bold]Sentiment of {escape(column)}[/bold]: {summary.total} rows analyzed")
    for label in SentimentLabel:
        style = LABEL_STYLES[label]
        count = getattr(summary, label.value)
        console.print(
            f"  [{style}]{label.value:<8}[/{style}] {count:>5}  ({summary.share(label):.1f}%)"
        )

    if not breakdown.rows or rows <= 0:
        return

    rich_table = RichTable(title=f"First {min(rows, len(breakdown.rows))} rows")
    rich_table.add_column("Row", justify="right", style="dim")
    rich_table.add_column("Score", justify="right")
    rich_table.add_column("Label")
    rich_table.add_column("Text")
    for row in breakdown.rows[:rows]:
        style = LABEL_STYLES[row.label]
        rich_table.add_row(
            str(row.row),
            str(row.score),
            f"[{style}]{row.label.value}[/{style}]",
            escape(row.preview),
        )
    console.print(rich_table)
