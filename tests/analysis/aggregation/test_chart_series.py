"""Tests for chart aggregation."""

import pytest

from sheetsense.analysis.aggregation import (
    compute_chart_series,
    compute_pie_slices,
    suggest_chart_axes,
)
from sheetsense.analysis.typing import get_column_profiles
from sheetsense.core.models.base import AnalysisIssue
from sheetsense.core.table import ParsedTable


def _points(series) -> dict:
    return {p.group_key: p for p in series.points}


class TestFlatSeries:
    """Tests for aggregation without a group column."""

    def test_category_amount(self):
        table = ParsedTable(
            headers=["category", "amount"],
            rows=[["A", 10], ["A", 20], ["B", 5]],
        )
        series = compute_chart_series(table, "category", ["amount"]).unwrap()
        points = _points(series)
        assert list(points) == ["A", "B"]
        assert points["A"].count == 2
        assert points["A"].measures["amount"].sum == 30
        assert points["A"].measures["amount"].mean == 15
        assert points["B"].count == 1
        assert points["B"].measures["amount"].sum == 5
        assert points["B"].measures["amount"].mean == 5
        assert not series.truncated

    def test_null_key_becomes_unknown(self, sales_table):
        series = compute_chart_series(sales_table, "category", ["amount"]).unwrap()
        assert [p.group_key for p in series.points] == ["A", "B", "Unknown"]
        assert _points(series)["Unknown"].measures["amount"].sum == 15

    def test_counts_cover_every_row(self, sales_table):
        series = compute_chart_series(sales_table, "category", ["amount", "units"]).unwrap()
        assert sum(p.count for p in series.points) == sales_table.row_count

    def test_numeric_x_column(self, sales_table):
        series = compute_chart_series(sales_table, "units", ["amount"]).unwrap()
        assert [p.group_key for p in series.points] == ["1", "2", "3", "5"]
        assert _points(series)["3"].measures["amount"].sum == 35

    def test_invalid_measure_cells_count_as_zero(self):
        table = ParsedTable(
            headers=["k", "v"],
            rows=[["a", "4"], ["a", "n/a"], ["a", "2"], ["b", "6"], ["b", "8"]],
        )
        series = compute_chart_series(table, "k", ["v"]).unwrap()
        aggregate = _points(series)["a"].measures["v"]
        assert aggregate.count == 3
        assert aggregate.sum == 6
        assert aggregate.mean == 2

    def test_records(self, sales_table):
        series = compute_chart_series(sales_table, "category", ["amount"]).unwrap()
        assert series.to_records()[0] == {
            "name": "A",
            "count": 3,
            "amount": 20.0,
            "amount_sum": 60.0,
            "amount_count": 3,
        }


class TestPercentages:
    """Tests for percentage mode."""

    def test_percentages_sum_to_100(self, sales_table):
        result = compute_chart_series(sales_table, "category", ["amount"], percentage=True)
        series = result.unwrap()
        percentages = [p.measures["amount"].percentage for p in series.points]
        assert percentages == pytest.approx([75.0, 6.25, 18.75])
        assert sum(percentages) == pytest.approx(100.0)
        assert series.percentage
        assert series.to_records()[0]["amount_percentage"] == pytest.approx(75.0)

    def test_zero_total(self):
        table = ParsedTable(headers=["k", "v"], rows=[["a", 0], ["b", 0]])
        series = compute_chart_series(table, "k", ["v"], percentage=True).unwrap()
        assert [p.measures["v"].percentage for p in series.points] == [0.0, 0.0]

    def test_ignored_when_grouped(self, sales_table):
        result = compute_chart_series(
            sales_table, "category", ["amount"], group_column="channel", percentage=True
        )
        assert result.success
        assert not result.unwrap().percentage
        assert any("Percentage" in w for w in result.warnings)


class TestGroupedSeries:
    """Tests for aggregation with a group column."""

    def test_pivoted_means(self, sales_table):
        series = compute_chart_series(
            sales_table, "category", ["amount"], group_column="channel"
        ).unwrap()
        assert series.grouped
        assert series.series_keys == ["online_amount", "store_amount"]

        points = _points(series)
        assert points["A"].count == 3
        assert points["A"].measures["online_amount"].mean == 20
        assert points["A"].measures["online_amount"].count == 2
        assert points["A"].measures["store_amount"].mean == 20
        assert set(points["B"].measures) == {"online_amount"}
        assert points["Unknown"].measures["store_amount"].mean == 15

    def test_records(self, sales_table):
        series = compute_chart_series(
            sales_table, "category", ["amount", "units"], group_column="channel"
        ).unwrap()
        assert series.to_records()[1] == {"name": "B", "online_amount": 5.0, "online_units": 3.0}


class TestTruncation:
    """Tests for the partition bound."""

    @pytest.fixture
    def many_keys(self) -> ParsedTable:
        return ParsedTable(
            headers=["key", "value"],
            rows=[[f"k{i:02d}", i] for i in range(60)],
        )

    def test_first_seen_partitions_kept(self, many_keys):
        result = compute_chart_series(many_keys, "key", ["value"])
        series = result.unwrap()
        assert len(series.points) == 50
        assert series.total_partitions == 60
        assert series.truncated
        assert series.points[-1].group_key == "k49"
        assert result.warnings == ["Showing first 50 of 60 partitions"]

    def test_custom_bound(self, many_keys):
        series = compute_chart_series(many_keys, "key", ["value"], max_partitions=5).unwrap()
        assert [p.group_key for p in series.points] == ["k00", "k01", "k02", "k03", "k04"]


class TestSelectionValidation:
    """Tests for unusable column selections."""

    @pytest.mark.parametrize(
        "x,measures,group",
        [
            ("missing", ["amount"], None),
            ("category", [], None),
            ("category", ["missing"], None),
            ("category", ["channel"], None),
            ("category", ["amount"], "units"),
            ("channel", ["amount"], "channel"),
            ("category", ["amount"], "missing"),
        ],
    )
    def test_invalid_selection(self, sales_table, x, measures, group):
        result = compute_chart_series(sales_table, x, measures, group_column=group)
        assert not result.success
        assert result.issue is AnalysisIssue.INVALID_COLUMN_SELECTION

    def test_empty_table(self, empty_table):
        result = compute_chart_series(empty_table, "category", ["amount"])
        assert result.issue is AnalysisIssue.EMPTY_TABLE


class TestPieAndAxes:
    """Tests for pie slices and default axes."""

    def test_pie_sorted_by_value(self, sales_table):
        series = compute_chart_series(sales_table, "category", ["amount"]).unwrap()
        slices = compute_pie_slices(series)
        assert [(s.name, s.value) for s in slices] == [("A", 20.0), ("Unknown", 15.0), ("B", 5.0)]
        assert len(compute_pie_slices(series, limit=2)) == 2

    def test_pie_percentages(self, sales_table):
        series = compute_chart_series(sales_table, "category", ["amount"], percentage=True).unwrap()
        slices = compute_pie_slices(series, use_percentage=True)
        assert slices[0].name == "A"
        assert slices[0].value == pytest.approx(75.0)

    def test_pie_empty_for_grouped(self, sales_table):
        series = compute_chart_series(
            sales_table, "category", ["amount"], group_column="channel"
        ).unwrap()
        assert compute_pie_slices(series) == []

    def test_suggest_axes(self, sales_table):
        axes = suggest_chart_axes(get_column_profiles(sales_table).unwrap())
        assert axes.x_column == "category"
        assert axes.measure_columns == ["amount"]
