"""JSON eql diff - exact JSON equality assertions with readable difference reports."""

from __future__ import annotations

from json_eql_diff.algorithm.config import EqlJsonConfig
from json_eql_diff.algorithm.report import DiffReport, ReportEntry
from json_eql_diff.api import assert_eql_json, diff_report, eql_json, json_response
from json_eql_diff.errors import (
    ExpectationStateError,
    JsonEqlDiffError,
    PathError,
    UnsupportedValueError,
)
from json_eql_diff.expectation import JsonExpectation

__version__: str = "0.1.0"
__all__: list[str] = [
    "DiffReport",
    "EqlJsonConfig",
    "ExpectationStateError",
    "JsonEqlDiffError",
    "JsonExpectation",
    "PathError",
    "ReportEntry",
    "UnsupportedValueError",
    "assert_eql_json",
    "diff_report",
    "eql_json",
    "json_response",
]
