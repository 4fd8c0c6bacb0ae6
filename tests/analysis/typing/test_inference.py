"""Tests for column type inference.

Classification is based on sampled values only, never on column names.
"""

import pytest

from sheetsense.analysis.typing import (
    get_column_profiles,
    numeric_columns,
    profile_column,
    sample_values,
    text_columns,
)
from sheetsense.core.models.base import AnalysisIssue, ColumnKind
from sheetsense.core.table import ParsedTable


def _column(values: list) -> ParsedTable:
    return ParsedTable(headers=["col"], rows=[[v] for v in values])


class TestSampling:
    """Tests for the sampled prefix."""

    def test_sample_skips_blanks(self):
        table = _column([None, "", "  ", "5", "6"])
        assert sample_values(table, "col", 10) == ["5", "6"]

    def test_sample_is_bounded(self):
        table = _column([str(i) for i in range(30)])
        assert len(sample_values(table, "col", 10)) == 10


class TestProfileColumn:
    """Tests for single column classification."""

    def test_numeric_strings(self):
        profile = profile_column(_column(["1", "2.5", "-3"]), "col")
        assert profile.kind is ColumnKind.NUMERIC
        assert profile.numeric_ratio == 1.0
        assert profile.sampled == 3
        assert profile.is_numeric

    def test_threshold_is_strict(self):
        """Exactly 7 of 10 numeric is not more than 70%."""
        values = ["1"] * 7 + ["x"] * 3
        assert profile_column(_column(values), "col").kind is ColumnKind.TEXT

        values = ["1"] * 8 + ["x"] * 2
        assert profile_column(_column(values), "col").kind is ColumnKind.NUMERIC

    def test_only_prefix_is_sampled(self):
        """Text after the sampled prefix does not change the classification."""
        values = [str(i) for i in range(10)] + ["text"] * 20
        assert profile_column(_column(values), "col", sample_size=10).kind is ColumnKind.NUMERIC

    def test_all_blank_column_is_text(self):
        profile = profile_column(_column([None, "", None]), "col")
        assert profile.kind is ColumnKind.TEXT
        assert profile.sampled == 0
        assert profile.numeric_ratio == 0.0

    def test_column_name_is_ignored(self):
        table = ParsedTable(headers=["amount"], rows=[["north"], ["south"]])
        assert profile_column(table, "amount").kind is ColumnKind.TEXT

    @pytest.mark.parametrize(
        "threshold,expected",
        [(0.5, ColumnKind.NUMERIC), (0.9, ColumnKind.TEXT)],
    )
    def test_custom_threshold(self, threshold, expected):
        values = ["1", "2", "3", "x"]
        assert profile_column(_column(values), "col", numeric_threshold=threshold).kind is expected


class TestGetColumnProfiles:
    """Tests for whole-table profiling."""

    def test_profiles_in_header_order(self, sales_table):
        result = get_column_profiles(sales_table)
        assert result.success
        profiles = result.unwrap()
        assert [p.name for p in profiles] == ["category", "channel", "amount", "units"]
        assert numeric_columns(profiles) == ["amount", "units"]
        assert text_columns(profiles) == ["category", "channel"]

    def test_empty_table(self, empty_table):
        result = get_column_profiles(empty_table)
        assert not result.success
        assert result.issue is AnalysisIssue.EMPTY_TABLE
