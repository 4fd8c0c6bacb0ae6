"""File loaders that produce a ParsedTable.

CSV files are untyped - every cell is read as text and type interpretation is
left to the analysis engine. JSON files are either an array of records or a
single (possibly nested) object.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

import duckdb

from sheetsense.core.exceptions import SourceLoadError, TableStructureError
from sheetsense.core.logging import get_logger
from sheetsense.core.table import ParsedTable

logger = get_logger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".json")


def load_csv_table(path: Path | str) -> ParsedTable:
    """Load a CSV file with all columns as VARCHAR.

    Empty fields become None.

    Args:
        path: Path to the CSV file

    Returns:
        ParsedTable with one row per data line

    Raises:
        SourceLoadError: If the file is missing or cannot be parsed
    """
    path = Path(path)
    if not path.exists():
        raise SourceLoadError(f"CSV file not found: {path}", path=str(path))

    conn = duckdb.connect(":memory:")
    try:
        cursor = conn.execute(
            "SELECT * FROM read_csv_auto(?, header = true, all_varchar = true)",
            [str(path)],
        )
        headers = [col[0] for col in cursor.description or []]
        rows = cursor.fetchall()
    except duckdb.Error as e:
        raise SourceLoadError(f"Failed to read CSV: {e}", path=str(path)) from e
    finally:
        conn.close()

    logger.debug("csv_loaded", path=str(path), columns=len(headers), rows=len(rows))
    return ParsedTable(headers=headers, rows=rows)


def load_json_table(path: Path | str) -> ParsedTable:
    """Load a JSON file.

    An array of objects becomes one row per object; a single object is
    flattened into one row with dotted keys.

    Raises:
        SourceLoadError: If the file is missing, is not valid JSON, or holds
            anything other than an object or an array of objects
    """
    path = Path(path)
    if not path.exists():
        raise SourceLoadError(f"JSON file not found: {path}", path=str(path))

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SourceLoadError(f"Invalid JSON: {e}", path=str(path)) from e

    try:
        if isinstance(data, list):
            table = ParsedTable.from_records(data)
        elif isinstance(data, Mapping):
            table = ParsedTable.from_object(data)
        else:
            raise SourceLoadError(
                f"Expected an object or an array of objects, got {type(data).__name__}",
                path=str(path),
            )
    except TableStructureError as e:
        raise SourceLoadError(f"Malformed records: {e.message}", path=str(path)) from e

    logger.debug("json_loaded", path=str(path), columns=table.column_count, rows=table.row_count)
    return table


def load_table(path: Path | str) -> ParsedTable:
    """Load a CSV or JSON file, chosen by extension."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return load_csv_table(path)
    if suffix == ".json":
        return load_json_table(path)
    raise SourceLoadError(
        f"Unsupported file type '{path.suffix}', expected one of {', '.join(SUPPORTED_SUFFIXES)}",
        path=str(path),
    )
