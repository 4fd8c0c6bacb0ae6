"""Shared pytest fixtures for all tests."""

import pytest

from sheetsense.core.table import ParsedTable


@pytest.fixture
def empty_table() -> ParsedTable:
    """Table with headers but no rows."""
    return ParsedTable(headers=["category", "amount", "comment"], rows=[])


@pytest.fixture
def scores_table() -> ParsedTable:
    """Single numeric column with values 1..5."""
    return ParsedTable(headers=["score"], rows=[[1], [2], [3], [4], [5]])


@pytest.fixture
def sales_table() -> ParsedTable:
    """Small sales table with text dimensions and numeric measures.

    Values are strings, as they would come from a CSV file.
    """
    return ParsedTable.from_records(
        [
            {"category": "A", "channel": "online", "amount": "10", "units": "1"},
            {"category": "A", "channel": "store", "amount": "20", "units": "2"},
            {"category": "B", "channel": "online", "amount": "5", "units": "3"},
            {"category": "A", "channel": "online", "amount": "30", "units": "3"},
            {"category": None, "channel": "store", "amount": "15", "units": "5"},
        ]
    )


@pytest.fixture
def reviews_table() -> ParsedTable:
    """Free-text reviews with a numeric rating."""
    return ParsedTable.from_records(
        [
            {"rating": 5, "comment": "good product, great value"},
            {"rating": 1, "comment": "bad service and terrible support"},
            {"rating": 3, "comment": "okay"},
            {"rating": 4, "comment": "I love this product"},
            {"rating": None, "comment": None},
        ]
    )
