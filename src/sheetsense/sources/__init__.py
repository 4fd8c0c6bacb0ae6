"""Data source loaders."""

from sheetsense.sources.loader import load_csv_table, load_json_table, load_table

__all__ = [
    "load_csv_table",
    "load_json_table",
    "load_table",
]
