"""Diff report builder: turns flat diff operations into readable entries.

The builder walks both values depth-first.  At every level it diffs the two
current values, groups the operations by child name and then either:

- descends into the child, when both sides are non-empty objects or both are
  non-empty arrays, so nested changes are reported per field instead of as one
  "whole object replaced" line; or
- emits a leaf ReportEntry for the child's full path.

Each full path is reported at most once per build.  Traversal uses an explicit
work stack, so nesting depth is not bounded by the interpreter recursion
limit.  Entries come out in pre-order: within a level, children follow the
differ's sorted order, and a descended child's entries precede its later
siblings.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from json_eql_diff.algorithm.config import EqlJsonConfig
from json_eql_diff.algorithm.differ import DiffOp, DiffOpType, diff
from json_eql_diff.tree.paths import UNDEFINED, Path, child_path, lookup, serialize
from json_eql_diff.tree.values import ValueKind, is_non_empty_composite

__all__ = ["DiffReport", "ReportEntry", "build_report", "format_value"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportEntry:
    """One reported difference.

    Attributes:
        path:          Full path of the differing value from the root.
        expected_text: Formatted expected-side value ("" when absent).
        actual_text:   Formatted actual-side value ("" when absent).
    """

    path: Path
    expected_text: str
    actual_text: str

    @property
    def path_text(self) -> str:
        return serialize(self.path)

    def render(self) -> str:
        return (
            f"{self.path_text}\n"
            f"Expected: {self.expected_text}\n"
            f"Actual: {self.actual_text}\n\n"
        )


@dataclass(frozen=True, slots=True)
class DiffReport:
    """Ordered, deduplicated list of ReportEntry records."""

    entries: tuple[ReportEntry, ...] = ()

    @property
    def paths(self) -> list[str]:
        """Serialized paths of all entries, in report order."""
        return [entry.path_text for entry in self.entries]

    def render(self) -> str:
        """Render every entry as a path / Expected / Actual block."""
        return "".join(entry.render() for entry in self.entries)

    def __iter__(self) -> Iterator[ReportEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)


@dataclass(frozen=True, slots=True)
class _Pending:
    """Work item: a pair to descend into, or a leaf waiting to be emitted."""

    path: Path
    actual: Any
    expected: Any
    leaf: bool


def format_value(value: Any) -> str:
    """Format one side of a leaf entry.

    Strings are single-quoted, absent values render as ``""`` and everything
    else uses ``str()``.
    """
    if value is UNDEFINED:
        return ""
    if isinstance(value, str):
        return f"'{value}'"
    return str(value)


def build_report(
    actual: Any,
    expected: Any,
    config: EqlJsonConfig | None = None,
) -> DiffReport:
    """Build the difference report between two JSON values.

    Args:
        actual:   Value produced by the code under test.
        expected: Reference value.
        config:   Equality settings.  Defaults to ``EqlJsonConfig()``.

    Returns:
        A DiffReport; empty when the values are equal.

    Raises:
        UnsupportedValueError: If either side contains a non-JSON value.
    """
    cfg = config if config is not None else EqlJsonConfig()
    entries: list[ReportEntry] = []
    reported: set[str] = set()
    stack: list[_Pending] = [_Pending((), actual, expected, leaf=False)]

    while stack:
        item = stack.pop()

        if item.leaf:
            path_text = serialize(item.path)
            if path_text in reported:
                logger.debug("Skipping already reported path %r", path_text)
                continue
            reported.add(path_text)
            entries.append(
                ReportEntry(
                    path=item.path,
                    expected_text=format_value(item.expected),
                    actual_text=format_value(item.actual),
                )
            )
            continue

        level = _expand_level(item, actual, expected, cfg)
        # Reverse so the first child is popped first.
        stack.extend(reversed(level))

    return DiffReport(tuple(entries))


def _expand_level(
    item: _Pending,
    actual_root: Any,
    expected_root: Any,
    cfg: EqlJsonConfig,
) -> list[_Pending]:
    ops = diff(item.actual, item.expected, cfg)
    logger.debug("%d diff operation(s) at %r", len(ops), serialize(item.path))

    level: list[_Pending] = []
    for name, group in _group_by_name(ops).items():
        full_path = child_path(item.path, name)

        missing = _carried(group, DiffOpType.REMOVED, "old")
        if missing is UNDEFINED:
            missing = lookup(actual_root, full_path)
        extra = _carried(group, DiffOpType.ADDED, "new")
        if extra is UNDEFINED:
            extra = lookup(expected_root, full_path)

        descend = _same_non_empty_composite(missing, extra)
        level.append(_Pending(full_path, missing, extra, leaf=not descend))
    return level


def _group_by_name(ops: list[DiffOp]) -> dict[Path, dict[DiffOpType, DiffOp]]:
    groups: dict[Path, dict[DiffOpType, DiffOp]] = {}
    for op in ops:
        groups.setdefault(op.path, {})[op.op] = op
    return groups


def _carried(group: dict[DiffOpType, DiffOp], op_type: DiffOpType, side: str) -> Any:
    """Return the value a group carries for one side, or UNDEFINED."""
    op = group.get(op_type) or group.get(DiffOpType.CHANGED)
    if op is None:
        return UNDEFINED
    return getattr(op, side)


def _same_non_empty_composite(missing: Any, extra: Any) -> bool:
    return any(
        is_non_empty_composite(missing, kind) and is_non_empty_composite(extra, kind)
        for kind in (ValueKind.OBJECT, ValueKind.ARRAY)
    )
