"""Main CLI application entry point."""

from __future__ import annotations

import typer

from sheetsense.cli.commands import chart, correlate, preview, profile, text

app = typer.Typer(
    name="sheetsense",
    help="Sheetsense - quick analytics for CSV and JSON tables.",
    no_args_is_help=True,
)

# Register commands
app.command()(profile.profile)
app.command()(profile.stats)
app.command()(correlate.correlate)
app.command()(chart.chart)
app.command()(text.words)
app.command()(text.sentiment)
app.command()(preview.preview)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
