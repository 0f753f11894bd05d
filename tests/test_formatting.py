"""Unit tests for value and operator formatting."""

from __future__ import annotations

import pytest

from flowscribe.compiler.formatting import format_value, map_operator, quote_string


class TestFormatValue:
    # ------------------------------------------------------------------ strings

    def test_plain_string_is_single_quoted(self):
        assert format_value("hello") == "'hello'"

    def test_single_quote_escaped(self):
        assert format_value("it's") == "'it\\'s'"

    def test_backslash_escaped(self):
        assert format_value("a\\b") == "'a\\\\b'"

    def test_newline_escaped(self):
        assert format_value("line1\nline2") == "'line1\\nline2'"

    def test_double_quotes_left_alone(self):
        assert format_value('say "hi"') == "'say \"hi\"'"

    def test_quote_string_matches_format_value(self):
        assert quote_string("x'y") == format_value("x'y")

    # ------------------------------------------------------------------ scalars

    def test_booleans_are_js_keywords(self):
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_integer_verbatim(self):
        assert format_value(42) == "42"
        assert format_value(-7) == "-7"

    def test_float_verbatim(self):
        assert format_value(1.5) == "1.5"

    def test_whole_float_has_no_fraction(self):
        assert format_value(2.0) == "2"

    # ------------------------------------------------------------------ structured

    def test_none_is_null(self):
        assert format_value(None) == "null"

    def test_list_is_compact_json(self):
        assert format_value([1, "a", True]) == '[1,"a",true]'

    def test_dict_is_compact_json(self):
        assert format_value({"a": 1, "b": [2]}) == '{"a":1,"b":[2]}'


class TestMapOperator:
    @pytest.mark.parametrize("op,expected", [
        ("==", "==="),
        ("!=", "!=="),
        (">", ">"),
        ("<", "<"),
        (">=", ">="),
        ("<=", "<="),
    ])
    def test_mapping(self, op, expected):
        assert map_operator(op) == expected
