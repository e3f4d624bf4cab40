"""algorithm subpackage -- public API for diffing and report building.

Provides the one-level structural differ, the recursive report builder and
their shared configuration.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from json_eql_diff.algorithm import build_report

    report = build_report({"c": {"d": "d", "e": "e"}}, {"c": {"e": "e2"}})
    report.paths  # ["c.d", "c.e"]
"""

from __future__ import annotations

from json_eql_diff.algorithm.config import EqlJsonConfig
from json_eql_diff.algorithm.differ import DiffOp, DiffOpType, diff
from json_eql_diff.algorithm.report import (
    DiffReport,
    ReportEntry,
    build_report,
    format_value,
)

__all__ = [
    "DiffOp",
    "DiffOpType",
    "DiffReport",
    "EqlJsonConfig",
    "ReportEntry",
    "build_report",
    "diff",
    "format_value",
]
