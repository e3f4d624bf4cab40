"""JSON value model: ValueKind StrEnum, kind dispatch and deep equality.

Comparable data is plain decoded JSON (dict, list, str, int, float, bool,
None), arbitrarily nested. This module classifies such values into one of six
kinds and defines the structural equality used by both the equality check and
the differ.
"""

from __future__ import annotations

import math
from enum import StrEnum, auto
from typing import Any

from json_eql_diff.errors import UnsupportedValueError

__all__ = [
    "JsonValue",
    "ValueKind",
    "is_non_empty_composite",
    "kind_of",
    "values_equal",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"  : int or float
    - STRING  -> "string"
    - ARRAY   -> "array"   : ordered, index-addressed
    - OBJECT  -> "object"  : string-keyed, order-insensitive for equality
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


def kind_of(value: Any) -> ValueKind:
    """Return the ValueKind of a decoded JSON value.

    bool MUST be checked before int because bool is a subclass of int.

    Raises:
        UnsupportedValueError: If value is not a valid JSON type.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise UnsupportedValueError(value)


def is_non_empty_composite(value: Any, kind: ValueKind) -> bool:
    """Return True if value is a non-empty container of the given kind."""
    if kind == ValueKind.OBJECT:
        return isinstance(value, dict) and len(value) > 0
    if kind == ValueKind.ARRAY:
        return isinstance(value, list) and len(value) > 0
    return False


def values_equal(left: Any, right: Any, strict_number_types: bool = False) -> bool:
    """Structural deep equality over JSON values.

    Lists are compared position by position; dicts are compared by key set
    and per-key value, ignoring insertion order. Values of different kinds
    are never equal, so ``True`` does not equal ``1``.

    Args:
        left:  First JSON value.
        right: Second JSON value.
        strict_number_types: When True, ``int`` and ``float`` are distinct
            (``1`` does not equal ``1.0``).

    Returns:
        True if both values are structurally identical.

    Raises:
        UnsupportedValueError: If either side contains a non-JSON value.
    """
    # Explicit stack: nesting depth is bounded by memory, not recursion limit.
    pending: list[tuple[Any, Any]] = [(left, right)]

    while pending:
        a, b = pending.pop()
        kind = kind_of(a)
        if kind != kind_of(b):
            return False

        if kind == ValueKind.OBJECT:
            if a.keys() != b.keys():
                return False
            pending.extend((a[key], b[key]) for key in a)
        elif kind == ValueKind.ARRAY:
            if len(a) != len(b):
                return False
            pending.extend(zip(a, b, strict=True))
        elif kind == ValueKind.NUMBER:
            if strict_number_types and isinstance(a, float) != isinstance(b, float):
                return False
            if not _numbers_equal(a, b):
                return False
        elif a != b:
            return False

    return True


def _numbers_equal(a: int | float, b: int | float) -> bool:
    # json.loads accepts NaN; two NaNs compare equal.
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a):
        return math.isnan(b)
    return a == b
