"""Translate ``${namespace.identifier}`` interpolation into JS expressions."""

from __future__ import annotations

import re

from flowscribe.compiler.formatting import quote_string

NAMESPACES = ("extract", "input", "constants")

_TOKEN = r"\$\{((?:" + "|".join(NAMESPACES) + r")\.[A-Za-z_][A-Za-z0-9_]*)\}"
VARIABLE_PATTERN = re.compile(_TOKEN)

_TEMPLATE_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "`": "\\`",
})


def has_variables(raw: str) -> bool:
    return VARIABLE_PATTERN.search(raw) is not None


def _escape_template_segment(segment: str) -> str:
    # A stray "${" would open a live expression inside the template literal
    return segment.translate(_TEMPLATE_ESCAPES).replace("${", "\\${")


def translate(raw: str) -> str:
    """
    Turn a workflow string into a JS expression.

    * no variables           → ``'quoted literal'``
    * exactly one variable   → ``input.amount`` (keeps the runtime type)
    * variables inside text  → ```Hello ${input.name}!```
    """
    if not has_variables(raw):
        return quote_string(raw)

    full = VARIABLE_PATTERN.fullmatch(raw)
    if full:
        return full.group(1)

    parts: list[str] = []
    pos = 0
    for match in VARIABLE_PATTERN.finditer(raw):
        parts.append(_escape_template_segment(raw[pos:match.start()]))
        parts.append("${" + match.group(1) + "}")
        pos = match.end()
    parts.append(_escape_template_segment(raw[pos:]))
    return "`" + "".join(parts) + "`"
