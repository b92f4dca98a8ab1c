"""Tests for the text parsers and the number formatter."""

from __future__ import annotations

import math
from decimal import Decimal

import pytest

from strval.domain.parsing import (
    INT64_MAX,
    INT64_MIN,
    float_from_decimal,
    format_number,
    parse_bool,
    parse_float,
    parse_int,
)
from strval.errors import ParseError


class TestParseBool:
    @pytest.mark.parametrize("text", ["true", "TRUE", " True ", "yes", "YES", "y", "Y", "1"])
    def test_truthy_words(self, text: str) -> None:
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["false", "False", "no", "NO", "n", "0", "\tfalse\n"])
    def test_falsy_words(self, text: str) -> None:
        assert parse_bool(text) is False

    @pytest.mark.parametrize(
        "text,normalized",
        [
            ("maybe", "maybe"),
            ("  On ", "on"),
            ("2", "2"),
            ("truee", "truee"),
            ("", ""),
            ("1.0", "1.0"),
        ],
    )
    def test_rejects_other_words(self, text: str, normalized: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_bool(text)
        assert exc_info.value.text == normalized
        assert exc_info.value.kind == "bool"
        assert str(exc_info.value) == f"cannot parse '{normalized}' as bool"

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_bool("nope")


class TestParseInt:
    @pytest.mark.parametrize(
        "text,expected",
        [("0", 0), ("42", 42), ("-10", -10), ("+7", 7), ("007", 7)],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_int(text) == expected

    @pytest.mark.parametrize(
        "text", ["abc", "", " 42", "42 ", "4_2", "3.14", "1e3", "0x10", "٣"]
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ParseError, match="as int"):
            parse_int(text)

    def test_int64_bounds(self) -> None:
        assert parse_int(str(INT64_MAX)) == INT64_MAX
        assert parse_int(str(INT64_MIN)) == INT64_MIN

    def test_out_of_range(self) -> None:
        with pytest.raises(ParseError, match="out of range"):
            parse_int(str(INT64_MAX + 1))


class TestParseFloat:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("3.5", 3.5),
            ("-2.718", -2.718),
            ("42", 42.0),
            ("1e3", 1000.0),
            ("1.5E-2", 0.015),
            (".5", 0.5),
            ("5.", 5.0),
        ],
    )
    def test_valid(self, text: str, expected: float) -> None:
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text", ["inf", "+Inf", "Infinity", "-infinity"])
    def test_infinity_literals(self, text: str) -> None:
        assert math.isinf(parse_float(text))

    def test_nan_literal(self) -> None:
        assert math.isnan(parse_float("NaN"))

    @pytest.mark.parametrize("text", ["abc", "", " 1.5", "1.5 ", "1_000.0", "1.2.3", ".", "e5"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ParseError, match="as float"):
            parse_float(text)

    def test_overflow(self) -> None:
        with pytest.raises(ParseError, match="out of range"):
            parse_float("1e400")


class TestFloatFromDecimal:
    @pytest.mark.parametrize(
        "value,expected",
        [(Decimal("1.25"), 1.25), (Decimal("-3"), -3.0), (Decimal("Infinity"), math.inf)],
    )
    def test_widens(self, value: Decimal, expected: float) -> None:
        assert float_from_decimal(value) == expected

    def test_finite_overflow(self) -> None:
        with pytest.raises(ParseError, match="out of range for float"):
            float_from_decimal(Decimal("-1e400"))


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (123, "123"),
            (-5, "-5"),
            (123.45, "123.45"),
            (98.5, "98.5"),
            (1.0, "1"),
            (-0.0, "0"),
            (0.1, "0.1"),
            (1e21, "1e+21"),
            (1.5e-7, "1.5e-07"),
        ],
    )
    def test_format(self, value: int | float, expected: str) -> None:
        assert format_number(value) == expected

    def test_round_trips(self) -> None:
        value = 0.1 + 0.2
        assert float(format_number(value)) == value
