"""Unit tests for lenient query-string parsing."""

from decimal import Decimal

import pytest

from src.presentation.routers.api.v1.query_params import (
    parse_csv,
    parse_decimal,
    parse_int,
)


@pytest.mark.unit
class TestParseInt:
    @pytest.mark.parametrize(
        "raw,default,expected",
        [
            ("25", None, 25),
            ("-3", 20, -3),
            ("abc", 20, 20),
            ("", 20, 20),
            (None, None, None),
            ("1.5", 7, 7),
        ],
    )
    def test_parse_int(self, raw, default, expected):
        assert parse_int(raw, default) == expected


@pytest.mark.unit
class TestParseDecimal:
    def test_valid(self):
        assert parse_decimal(" 10.50 ") == Decimal("10.50")

    @pytest.mark.parametrize("raw", [None, "", "ten", "NaN", "Infinity"])
    def test_unparseable_is_ignored(self, raw):
        assert parse_decimal(raw) is None


@pytest.mark.unit
class TestParseCsv:
    def test_splits_and_trims(self):
        assert parse_csv("STOCK, ETF,,") == ["STOCK", "ETF"]

    @pytest.mark.parametrize("raw", [None, "", " , "])
    def test_empty_is_none(self, raw):
        assert parse_csv(raw) is None
