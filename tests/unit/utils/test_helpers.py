"""
Tests pour les fonctions utilitaires (parse_number, format_columns).
"""

import pytest

from dvd_library.utils.helpers import format_columns, parse_number


class TestParseNumber:
    """Tests pour parse_number."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("3", 3),
            (" 6 ", 6),
            ("-2", -2),
            ("1,000", 1000),
            ("2.5", 2.5),
        ],
    )
    def test_parse_valid_numbers(self, text, expected):
        assert parse_number(text) == expected

    def test_parse_integer_returns_int(self):
        assert isinstance(parse_number("4"), int)

    @pytest.mark.parametrize("text", ["", "abc", "1a", "1,00", "1.", "--1"])
    def test_parse_invalid_returns_none(self, text):
        assert parse_number(text) is None


class TestFormatColumns:
    """Tests pour format_columns."""

    def test_pads_to_minimum_width(self):
        assert format_columns(["a", "b"], [3]) == "a   | b"

    def test_last_unconstrained_column_not_padded(self):
        assert format_columns(["a", "b", "c"], [1, 1]) == "a | b | c"

    def test_long_value_not_truncated(self):
        assert format_columns(["abcdef", "x"], [2]) == "abcdef | x"

    def test_custom_separator(self):
        assert format_columns(["a", "b"], [1], separator=",") == "a,b"
