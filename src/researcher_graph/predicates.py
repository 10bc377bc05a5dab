"""AND/OR set-membership predicates over multi-valued attributes.

An expression is either an OR-list ``a|b|c`` (any value present) or an
AND-list ``AND:a|b|c`` (all values present). Values are compared to the
attribute's tags by exact string equality.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .tags import tokenize

AND_MARKER = 'AND:'
OR_SEPARATOR = '|'

MODE_AND = 'AND'
MODE_OR = 'OR'


def matches(raw_value: Any, expression: Optional[str]) -> bool:
    if not expression:
        return True
    if not raw_value:
        return False

    tags = tokenize(raw_value)
    if expression.startswith(AND_MARKER):
        required = expression[len(AND_MARKER):].split(OR_SEPARATOR)
        return all(value in tags for value in required)
    allowed = expression.split(OR_SEPARATOR)
    return any(value in tags for value in allowed)


def build_expression(values: Iterable[str], mode: str = MODE_OR) -> str:
    """Encode selected filter values as an expression string.

    Returns an empty string when nothing is selected, which callers treat as
    "no constraint".
    """
    mode_key = (mode or MODE_OR).upper()
    if mode_key not in (MODE_AND, MODE_OR):
        raise ValueError(f"Unknown filter mode: {mode!r}")
    selected = [v for v in values if v]
    if not selected:
        return ''
    joined = OR_SEPARATOR.join(selected)
    return f"{AND_MARKER}{joined}" if mode_key == MODE_AND else joined
