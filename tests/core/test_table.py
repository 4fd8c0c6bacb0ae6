"""Tests for the ParsedTable boundary, search and pagination."""

import pytest

from sheetsense.core.exceptions import TableStructureError
from sheetsense.core.table import ParsedTable, flatten_object, paginate, search_rows


class TestParsedTableValidation:
    """Tests for structural validation at construction."""

    def test_accepts_sequence_rows(self):
        table = ParsedTable(headers=["a", "b"], rows=[[1, 2], (3, 4)])
        assert table.row_count == 2
        assert table.column_count == 2
        assert table.column_values("b") == [2, 4]

    def test_accepts_mapping_rows(self):
        table = ParsedTable(headers=["a", "b"], rows=[{"b": 2, "a": 1}])
        assert table.cell(table.rows[0], "a") == 1
        assert list(table.iter_cells(table.rows[0])) == [1, 2]

    def test_duplicate_headers_rejected(self):
        with pytest.raises(TableStructureError, match="Duplicate headers"):
            ParsedTable(headers=["a", "b", "a"], rows=[])

    def test_non_string_header_rejected(self):
        with pytest.raises(TableStructureError):
            ParsedTable(headers=["a", 2], rows=[])

    def test_row_arity_mismatch_rejected(self):
        with pytest.raises(TableStructureError) as exc_info:
            ParsedTable(headers=["a", "b"], rows=[[1, 2], [3]])
        assert exc_info.value.row_index == 1

    def test_mapping_key_mismatch_rejected(self):
        with pytest.raises(TableStructureError):
            ParsedTable(headers=["a", "b"], rows=[{"a": 1, "c": 2}])

    def test_string_row_rejected(self):
        """A string is a sequence but never a valid row."""
        with pytest.raises(TableStructureError):
            ParsedTable(headers=["a", "b"], rows=["ab"])

    def test_missing_column_raises_key_error(self):
        table = ParsedTable(headers=["a"], rows=[[1]])
        assert not table.has_column("b")
        with pytest.raises(KeyError):
            table.column_values("b")

    def test_empty_table(self, empty_table):
        assert empty_table.is_empty
        assert empty_table.row_count == 0
        assert empty_table.column_count == 3


class TestTableConstructors:
    """Tests for from_records, from_matrix and from_object."""

    def test_from_records_aligns_to_first_record(self):
        table = ParsedTable.from_records(
            [
                {"name": "a", "value": 1},
                {"value": 2, "extra": "dropped"},
            ]
        )
        assert table.headers == ("name", "value")
        assert table.column_values("name") == ["a", None]
        assert table.column_values("value") == [1, 2]

    def test_from_records_serializes_nested_values(self):
        table = ParsedTable.from_records([{"tags": ["x", "y"], "meta": {"k": 1}}])
        assert table.column_values("tags") == ['["x", "y"]']
        assert table.column_values("meta") == ['{"k": 1}']

    def test_from_records_rejects_non_objects(self):
        with pytest.raises(TableStructureError):
            ParsedTable.from_records([{"a": 1}, [1, 2]])

    def test_from_records_empty(self):
        table = ParsedTable.from_records([])
        assert table.headers == ()
        assert table.is_empty

    def test_from_matrix(self):
        table = ParsedTable.from_matrix([["x", "y"], [1, 2], [3, 4]])
        assert table.headers == ("x", "y")
        assert table.column_values("x") == [1, 3]

    def test_from_object_flattens_with_dotted_keys(self):
        table = ParsedTable.from_object(
            {"id": 7, "owner": {"name": "Ann", "address": {"city": "Oslo"}}}
        )
        assert table.headers == ("id", "owner.name", "owner.address.city")
        assert table.row_count == 1
        assert table.column_values("owner.address.city") == ["Oslo"]

    def test_flatten_keeps_arrays_as_leaves(self):
        assert flatten_object({"a": {"b": [1, 2]}}) == {"a.b": [1, 2]}


class TestSearchAndPaginate:
    """Tests for the preview helpers."""

    @pytest.fixture
    def numbered(self) -> ParsedTable:
        return ParsedTable(
            headers=["id", "label"],
            rows=[[i, f"Item {i}"] for i in range(1, 46)],
        )

    def test_search_is_case_insensitive(self, sales_table):
        result = search_rows(sales_table, "ONLINE")
        assert result.row_count == 3
        assert result.headers == sales_table.headers

    def test_search_matches_numbers_as_text(self, numbered):
        result = search_rows(numbered, "45")
        assert result.column_values("id") == [45]

    def test_empty_search_returns_table(self, sales_table):
        assert search_rows(sales_table, "") is sales_table

    def test_paginate_first_page(self, numbered):
        page = paginate(numbered, page=1, per_page=20)
        assert page.total_pages == 3
        assert page.total_rows == 45
        assert len(page.rows) == 20

    def test_paginate_clamps_page(self, numbered):
        page = paginate(numbered, page=9, per_page=20)
        assert page.page == 3
        assert len(page.rows) == 5

        page = paginate(numbered, page=0, per_page=20)
        assert page.page == 1

    def test_paginate_empty_table(self, empty_table):
        page = paginate(empty_table)
        assert page.total_pages == 1
        assert page.rows == ()

    def test_paginate_rejects_non_positive_page_size(self, numbered):
        with pytest.raises(ValueError):
            paginate(numbered, per_page=0)
