"""In-memory parsed table.

``ParsedTable`` is the only input of the analysis engine. Construction is the
loading boundary: a table whose rows do not line up with its headers is
rejected here with ``TableStructureError`` and never reaches an analysis
function.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from sheetsense.core.coercion import to_text
from sheetsense.core.exceptions import TableStructureError

Row = Sequence[Any] | Mapping[str, Any]


@dataclass(frozen=True)
class ParsedTable:
    """Headers plus positionally aligned rows.

    Rows are either sequences aligned to ``headers`` or mappings with exactly
    the header key set. Missing cells are ``None``.
    """

    headers: tuple[str, ...]
    rows: tuple[Row, ...] = ()
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __init__(self, headers: Sequence[str], rows: Sequence[Row] = ()):
        object.__setattr__(self, "headers", tuple(headers))
        object.__setattr__(self, "rows", tuple(rows))
        object.__setattr__(self, "_index", {h: i for i, h in enumerate(self.headers)})
        self._validate()

    def _validate(self) -> None:
        """Check header uniqueness and row arity."""
        for header in self.headers:
            if not isinstance(header, str):
                raise TableStructureError(f"Header must be a string, got {header!r}")
        if len(self._index) != len(self.headers):
            duplicates = sorted({h for h in self.headers if self.headers.count(h) > 1})
            raise TableStructureError(f"Duplicate headers: {duplicates}")

        expected = set(self.headers)
        for i, row in enumerate(self.rows):
            if isinstance(row, Mapping):
                if set(row.keys()) != expected:
                    raise TableStructureError(
                        f"Row {i} keys do not match headers", row_index=i
                    )
            elif isinstance(row, str | bytes) or not isinstance(row, Sequence):
                raise TableStructureError(
                    f"Row {i} must be a sequence or mapping, got {type(row).__name__}",
                    row_index=i,
                )
            elif len(row) != len(self.headers):
                raise TableStructureError(
                    f"Row {i} has {len(row)} cells, expected {len(self.headers)}",
                    row_index=i,
                )

    # --- construction helpers ---

    @classmethod
    def from_records(cls, records: Sequence[Mapping[str, Any]]) -> ParsedTable:
        """Build a table from a list of objects.

        Headers come from the first record's keys. Later records are aligned to
        them: missing keys become None and extra keys are dropped. Nested
        object/array cells are serialized to JSON strings.
        """
        if not records:
            return cls(headers=[], rows=[])
        for i, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise TableStructureError(f"Record {i} is not an object", row_index=i)

        headers = [str(key) for key in records[0].keys()]
        rows = []
        for record in records:
            by_name = {str(k): v for k, v in record.items()}
            rows.append([_serialize_nested(by_name.get(h)) for h in headers])
        return cls(headers=headers, rows=rows)

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[Any]]) -> ParsedTable:
        """Build a table from a spreadsheet-like matrix whose first row holds headers."""
        if not matrix:
            return cls(headers=[], rows=[])
        headers = [to_text(h) for h in matrix[0]]
        return cls(headers=headers, rows=[list(row) for row in matrix[1:]])

    @classmethod
    def from_object(cls, obj: Mapping[str, Any]) -> ParsedTable:
        """Build a single-row table by flattening a nested object with dotted keys."""
        flat = flatten_object(obj)
        return cls(
            headers=list(flat.keys()),
            rows=[[_serialize_nested(v) for v in flat.values()]],
        )

    # --- access ---

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def has_column(self, name: str) -> bool:
        return name in self._index

    def cell(self, row: Row, column: str) -> Any:
        """Get the value of ``column`` in ``row``."""
        if isinstance(row, Mapping):
            return row[column]
        return row[self._index[column]]

    def column_values(self, column: str) -> list[Any]:
        """All values of a column in row order."""
        if column not in self._index:
            raise KeyError(column)
        return [self.cell(row, column) for row in self.rows]

    def iter_cells(self, row: Row) -> Iterator[Any]:
        """Cells of a row in header order."""
        for header in self.headers:
            yield self.cell(row, header)


@dataclass(frozen=True)
class TablePage:
    """One page of table rows for preview."""

    page: int
    per_page: int
    total_rows: int
    total_pages: int
    rows: tuple[Row, ...]


def flatten_object(obj: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested objects into dotted keys; arrays are kept as leaf values."""
    flattened: dict[str, Any] = {}
    for key, value in obj.items():
        new_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flattened.update(flatten_object(value, new_key))
        else:
            flattened[new_key] = value
    return flattened


def _serialize_nested(value: Any) -> Any:
    if isinstance(value, Mapping | list | tuple):
        return json.dumps(value, ensure_ascii=False, default=str)
    return value


def search_rows(table: ParsedTable, term: str) -> ParsedTable:
    """Rows whose text in any cell contains ``term`` (case-insensitive).

    An empty term returns the table unchanged.
    """
    if not term:
        return table
    needle = term.lower()
    matching = [
        row
        for row in table.rows
        if any(needle in to_text(cell).lower() for cell in table.iter_cells(row))
    ]
    return ParsedTable(headers=table.headers, rows=matching)


def paginate(table: ParsedTable, page: int = 1, per_page: int = 20) -> TablePage:
    """Slice a table into a preview page.

    ``page`` is 1-based and clamped to the valid range.
    """
    if per_page < 1:
        raise ValueError("per_page must be positive")
    total_pages = max(1, math.ceil(table.row_count / per_page))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * per_page
    return TablePage(
        page=page,
        per_page=per_page,
        total_rows=table.row_count,
        total_pages=total_pages,
        rows=table.rows[start : start + per_page],
    )
