"""Preview command - page through (and search) the loaded rows."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table as RichTable

from sheetsense.cli.common import JsonFlag, SourceArg, VerboseOption, console, prepare, print_json
from sheetsense.core.coercion import to_text
from sheetsense.core.table import paginate, search_rows


def preview(
    source: SourceArg,
    page: Annotated[int, typer.Option("--page", "-p", help="1-based page number")] = 1,
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Only rows containing this text (case-insensitive)"),
    ] = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Show the rows of a file, one page at a time.

    Examples:

        sheetsense preview sales.csv

        sheetsense preview sales.csv --search north --page 2
    """
    table, settings = prepare(source, verbose)
    if search:
        table = search_rows(table, search)
    table_page = paginate(table, page=page, per_page=max(settings.preview_page_size, 1))

    if json_output:
        print_json(
            {
                "page": table_page.page,
                "total_pages": table_page.total_pages,
                "total_rows": table_page.total_rows,
                "headers": list(table.headers),
                "rows": [
                    [to_text(cell) for cell in table.iter_cells(row)] for row in table_page.rows
                ],
            }
        )
        return

    rich_table = RichTable(
        title=f"{escape(source.name)}: page {table_page.page} of {table_page.total_pages} "
        f"({table_page.total_rows} rows)"
    )
    for header in table.headers:
        rich_table.add_column(escape(header), overflow="ellipsis")
    for row in table_page.rows:
        rich_table.add_row(*(escape(to_text(cell)) for cell in table.iter_cells(row)))
    console.print(rich_table)
