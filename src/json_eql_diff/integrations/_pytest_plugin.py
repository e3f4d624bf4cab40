"""pytest plugin for json-eql-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Provides:
- ini options ``eql_json_strict_number_types`` and
  ``eql_json_invalid_json_placeholder``
- fixtures ``eql_json_config``, ``assert_eql_json`` and ``eql_json``
- an assertion-report hook so ``assert actual == eql_json(expected)`` prints
  the difference report instead of pytest's generic comparison

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from json_eql_diff import api
from json_eql_diff.algorithm.config import (
    DEFAULT_INVALID_JSON_PLACEHOLDER,
    EqlJsonConfig,
)
from json_eql_diff.errors import UnsupportedValueError
from json_eql_diff.expectation import JsonExpectation

STRICT_NUMBER_TYPES_INI = "eql_json_strict_number_types"
INVALID_JSON_PLACEHOLDER_INI = "eql_json_invalid_json_placeholder"


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        STRICT_NUMBER_TYPES_INI,
        type="bool",
        default=False,
        help="json-eql-diff: treat int and float values as never equal.",
    )
    parser.addini(
        INVALID_JSON_PLACEHOLDER_INI,
        type="string",
        default=DEFAULT_INVALID_JSON_PLACEHOLDER,
        help="json-eql-diff: value json_response() returns for invalid bodies.",
    )


def pytest_assertrepr_compare(
    config: pytest.Config, op: str, left: Any, right: Any
) -> list[str] | None:
    """Explain failed ``==`` comparisons that involve a JsonExpectation."""
    if op != "==":
        return None

    if isinstance(right, JsonExpectation):
        expectation, actual = right, left
    elif isinstance(left, JsonExpectation):
        expectation, actual = left, right
    else:
        return None

    try:
        if expectation.matches(actual):
            return None
    except UnsupportedValueError:
        return None
    report_lines = expectation.failure_message().rstrip("\n").splitlines()
    return ["JSON values are not equal", *report_lines]


@pytest.fixture(scope="session")
def eql_json_config(pytestconfig: pytest.Config) -> EqlJsonConfig:
    """EqlJsonConfig built from the ``eql_json_*`` ini options."""
    return EqlJsonConfig(
        strict_number_types=bool(pytestconfig.getini(STRICT_NUMBER_TYPES_INI)),
        invalid_json_placeholder=str(pytestconfig.getini(INVALID_JSON_PLACEHOLDER_INI)),
    )


@pytest.fixture(scope="session")
def assert_eql_json(eql_json_config: EqlJsonConfig) -> Callable[[Any, Any], None]:
    """Fixture that returns a callable exact-JSON-equality asserter.

    Usage in tests::

        def test_body(assert_eql_json):
            assert_eql_json({"a": 1}, {"a": 1})

        def test_mismatch(assert_eql_json):
            with pytest.raises(AssertionError, match=r"Differences"):
                assert_eql_json({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` carrying the difference report when the values
        differ.
    """

    def _assert(actual: Any, expected: Any) -> None:
        api.assert_eql_json(actual, expected, config=eql_json_config)

    return _assert


@pytest.fixture(scope="session")
def eql_json(eql_json_config: EqlJsonConfig) -> Callable[[Any], JsonExpectation]:
    """Fixture that returns a JsonExpectation factory bound to the ini config.

    Usage in tests::

        def test_body(eql_json):
            assert {"a": 1} == eql_json({"a": 1})
    """

    def _factory(expected: Any) -> JsonExpectation:
        return api.eql_json(expected, config=eql_json_config)

    return _factory
