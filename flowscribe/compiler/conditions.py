"""Compile step ``when`` guards into JS boolean expressions."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from flowscribe.compiler.formatting import format_value, map_operator
from flowscribe.compiler.types import (
    CompoundCondition,
    Condition,
    WhenClause,
    parse_when,
)
from flowscribe.errors import InvalidWhenClauseError

logger = logging.getLogger(__name__)

_CONNECTORS = {
    "all": " && ",
    "any": " || ",
}


def compile_condition(condition: Condition | Mapping[str, Any]) -> str:
    """``{field, op, value}`` → ``field op value``."""
    if isinstance(condition, Mapping):
        condition = Condition.from_dict(condition)
    return f"{condition.field} {map_operator(condition.op)} {format_value(condition.value)}"


def compile_when(when: WhenClause | Mapping[str, Any]) -> str:
    """Return the guard expression (without the surrounding ``if``)."""
    if isinstance(when, Mapping):
        when = parse_when(when)

    if isinstance(when, Condition):
        return compile_condition(when)

    if isinstance(when, CompoundCondition):
        if when.match == "all":
            connector = _CONNECTORS["all"]
        else:
            if when.match not in (None, "any"):
                logger.warning(f"Unrecognised when.match {when.match!r}, joining conditions with OR")
            connector = _CONNECTORS["any"]
        return connector.join(compile_condition(c) for c in when.conditions)

    raise InvalidWhenClauseError()
