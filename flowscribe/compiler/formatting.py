"""Render literal values and comparison operators as JavaScript text."""

from __future__ import annotations

import json
import math
from typing import Any

_OPERATORS = {
    "==": "===",
    "!=": "!==",
}

# Characters that cannot appear raw inside a single-quoted JS string
_STRING_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
})


def quote_string(text: str) -> str:
    """Return *text* as a single-quoted JS string literal."""
    return "'" + text.translate(_STRING_ESCAPES) + "'"


def _format_number(value: int | float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        # JS prints whole floats without a fractional part
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def format_value(value: Any) -> str:
    """
    Format a Python value as a JS literal.

    Strings become quoted literals, booleans and numbers are written as-is,
    everything else (lists, dicts, None) is serialized the way
    ``JSON.stringify`` would.
    """
    if isinstance(value, str):
        return quote_string(value)
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def map_operator(op: str) -> str:
    """Map a workflow comparison operator to its JS equivalent."""
    return _OPERATORS.get(op, op)
