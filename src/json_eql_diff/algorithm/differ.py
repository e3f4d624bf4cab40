"""Structural differ: one-level diff operations between two JSON values.

``diff()`` compares the direct children of two values and returns a flat,
sorted list of DiffOp records.  It never descends into nested containers
itself; refining "whole child differs" operations into per-leaf entries is the
report builder's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_eql_diff.algorithm.config import EqlJsonConfig
from json_eql_diff.tree.paths import UNDEFINED, Path
from json_eql_diff.tree.values import ValueKind, kind_of, values_equal

__all__ = ["DiffOp", "DiffOpType", "diff"]


class DiffOpType(StrEnum):
    """Kind of a single diff operation.

    - ADDED   -> "added"   : present only on the expected side
    - REMOVED -> "removed" : present only on the actual side
    - CHANGED -> "changed" : present on both sides with unequal values
    """

    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()


@dataclass(frozen=True, slots=True)
class DiffOp:
    """One low-level difference at a direct child of the compared values.

    Attributes:
        op:   Which kind of difference this is.
        path: Relative path of the child: ``(key,)``, ``(index,)``, or ``()``
              when the compared values themselves differ.
        old:  Actual-side value.  UNDEFINED for ADDED.
        new:  Expected-side value.  UNDEFINED for REMOVED.
    """

    op: DiffOpType
    path: Path
    old: Any = UNDEFINED
    new: Any = UNDEFINED

    @classmethod
    def added(cls, path: Path, value: Any) -> DiffOp:
        return cls(DiffOpType.ADDED, path, new=value)

    @classmethod
    def removed(cls, path: Path, value: Any) -> DiffOp:
        return cls(DiffOpType.REMOVED, path, old=value)

    @classmethod
    def changed(cls, path: Path, old: Any, new: Any) -> DiffOp:
        return cls(DiffOpType.CHANGED, path, old=old, new=new)


def diff(
    actual: Any,
    expected: Any,
    config: EqlJsonConfig | None = None,
) -> list[DiffOp]:
    """Diff the direct children of two JSON values.

    Object vs object and array vs array comparisons produce one operation per
    differing key or index.  Any other pairing (scalars, or a kind mismatch)
    produces a single CHANGED operation at the empty path when the values are
    unequal.

    Args:
        actual:   Value produced by the code under test.
        expected: Reference value.
        config:   Equality settings.  Defaults to ``EqlJsonConfig()``.

    Returns:
        Operations ordered by child segment: keys lexicographically, indices
        numerically.  Sorting is stable.

    Raises:
        UnsupportedValueError: If either side contains a non-JSON value.
    """
    cfg = config if config is not None else EqlJsonConfig()
    actual_kind = kind_of(actual)
    expected_kind = kind_of(expected)

    if actual_kind == expected_kind == ValueKind.OBJECT:
        ops = _diff_objects(actual, expected, cfg)
    elif actual_kind == expected_kind == ValueKind.ARRAY:
        ops = _diff_arrays(actual, expected, cfg)
    elif values_equal(actual, expected, cfg.strict_number_types):
        ops = []
    else:
        ops = [DiffOp.changed((), actual, expected)]

    # Sorts on segments, not path text: "[2]" precedes "[10]", which a plain
    # string sort of the rendered paths would reverse.
    ops.sort(key=lambda op: op.path)
    return ops


def _diff_objects(
    actual: dict[str, Any],
    expected: dict[str, Any],
    cfg: EqlJsonConfig,
) -> list[DiffOp]:
    ops: list[DiffOp] = []

    for key, value in actual.items():
        if key not in expected:
            ops.append(DiffOp.removed((key,), value))
        elif not values_equal(value, expected[key], cfg.strict_number_types):
            ops.append(DiffOp.changed((key,), value, expected[key]))

    for key, value in expected.items():
        if key not in actual:
            ops.append(DiffOp.added((key,), value))

    return ops


def _diff_arrays(
    actual: list[Any],
    expected: list[Any],
    cfg: EqlJsonConfig,
) -> list[DiffOp]:
    ops: list[DiffOp] = []

    for idx in range(max(len(actual), len(expected))):
        if idx >= len(expected):
            ops.append(DiffOp.removed((idx,), actual[idx]))
        elif idx >= len(actual):
            ops.append(DiffOp.added((idx,), expected[idx]))
        elif not values_equal(actual[idx], expected[idx], cfg.strict_number_types):
            ops.append(DiffOp.changed((idx,), actual[idx], expected[idx]))

    return ops
