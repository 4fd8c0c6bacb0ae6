"""CLI for sheetsense.

Provides commands for profiling and analyzing a CSV or JSON table.

Usage:
    sheetsense profile sales.csv
    sheetsense correlate sales.csv --x price --y quantity
    sheetsense chart sales.csv --x region -m revenue --percentage
    sheetsense sentiment reviews.json --column comment

Environment:
    Loads .env file from current directory if present.
    SHEETSENSE_* variables override the analysis defaults.
"""

from sheetsense.cli.main import app, main

__all__ = ["app", "main"]
