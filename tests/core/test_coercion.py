"""Tests for cell classification and coercion."""

import math

import pytest

from sheetsense.core.coercion import (
    UNKNOWN_KEY,
    classify_cell,
    coerce_number,
    is_blank,
    is_numeric,
    parse_number,
    partition_key,
    to_text,
)
from sheetsense.core.models.base import CellKind


class TestClassifyCell:
    """Tests for cell tagging."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, CellKind.NULL),
            ("", CellKind.NULL),
            ("   ", CellKind.NULL),
            (float("nan"), CellKind.NULL),
            (True, CellKind.BOOLEAN),
            (3, CellKind.NUMBER),
            (2.5, CellKind.NUMBER),
            ("hello", CellKind.TEXT),
            ({"a": 1}, CellKind.NESTED),
            ([1, 2], CellKind.NESTED),
        ],
    )
    def test_classify(self, value, expected):
        assert classify_cell(value) is expected

    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank(" \t")
        assert not is_blank(0)
        assert not is_blank("0")


class TestParseNumber:
    """Tests for the permissive numeric test."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("42", 42.0),
            (" 42 ", 42.0),
            ("-1.5", -1.5),
            ("+3", 3.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2.5E-2", 0.025),
            (7, 7.0),
            (True, 1.0),
            (False, 0.0),
        ],
    )
    def test_numeric_values(self, value, expected):
        assert parse_number(value) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "value",
        ["abc", "", "1,000", "12abc", "$5", "1.2.3", "0x1A", "\u0661\u0662", None, [1]],
    )
    def test_non_numeric_values(self, value):
        assert parse_number(value) is None
        assert not is_numeric(value)

    def test_infinity(self):
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf

    def test_coerce_number_defaults_to_zero(self):
        assert coerce_number("n/a") == 0.0
        assert coerce_number(None) == 0.0
        assert coerce_number("4") == 4.0


class TestToText:
    """Tests for display text rendering and partition keys."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, ""),
            ("abc", "abc"),
            (3, "3"),
            (3.0, "3"),
            (2.5, "2.5"),
            (True, "true"),
            ([1, 2], "[1, 2]"),
        ],
    )
    def test_to_text(self, value, expected):
        assert to_text(value) == expected

    def test_partition_key_unknown_for_null(self):
        assert partition_key(None) == UNKNOWN_KEY
        assert partition_key("") == UNKNOWN_KEY
        assert partition_key("North") == "North"
        assert partition_key(0) == "0"
