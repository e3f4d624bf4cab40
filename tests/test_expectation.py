"""Tests for JsonExpectation -- the matcher-protocol wrapper around the report.

Covers:
- matches(): deep equality, reflexivity, config forwarding
- failure_message(): exact text layout
- Laziness: the report builder never runs on the success path
- Report caching and reset between matches() calls
- State errors when messages are requested before matches()
- Python == support and the Matcher protocol
"""

from __future__ import annotations

from typing import Any
from unittest import mock

import pytest

from json_eql_diff.algorithm import report as report_module
from json_eql_diff.algorithm.config import EqlJsonConfig
from json_eql_diff.errors import ExpectationStateError, UnsupportedValueError
from json_eql_diff.expectation import JsonExpectation
from json_eql_diff.protocols import Matcher
from json_eql_diff.tree.paths import UNDEFINED


class TestMatches:
    @pytest.mark.parametrize(
        "value",
        [None, False, 3, 2.5, "a", [], {}, {"a": [1, {"b": None}]}],
    )
    def test_reflexive(self, value: Any) -> None:
        expectation = JsonExpectation(value)
        assert expectation.matches(value)
        assert len(expectation.report()) == 0

    def test_scalar_mismatch(self) -> None:
        assert not JsonExpectation("b").matches("a")

    def test_object_order_irrelevant(self) -> None:
        assert JsonExpectation({"a": 1, "b": 2}).matches({"b": 2, "a": 1})

    def test_strict_number_types_forwarded(self) -> None:
        lenient = JsonExpectation({"n": 1.0})
        strict = JsonExpectation(
            {"n": 1.0}, config=EqlJsonConfig(strict_number_types=True)
        )
        assert lenient.matches({"n": 1})
        assert not strict.matches({"n": 1})

    def test_actual_is_recorded(self) -> None:
        expectation = JsonExpectation(1)
        assert expectation.actual is UNDEFINED
        expectation.matches(2)
        assert expectation.actual == 2

    def test_not_diffable(self) -> None:
        assert JsonExpectation(1).diffable is False


class TestFailureMessage:
    def test_scalar_layout(self) -> None:
        expectation = JsonExpectation("b")
        expectation.matches("a")
        assert expectation.failure_message() == (
            "Expected: b\n\n"
            "Actual: a\n\n"
            "Differences\n\n"
            "\n"
            "Expected: 'b'\n"
            "Actual: 'a'\n\n"
        )

    def test_nested_layout(self) -> None:
        expectation = JsonExpectation({"c": {"e": "e2"}})
        expectation.matches({"c": {"d": "d", "e": "e"}})
        assert expectation.failure_message() == (
            "Expected: {'c': {'e': 'e2'}}\n\n"
            "Actual: {'c': {'d': 'd', 'e': 'e'}}\n\n"
            "Differences\n\n"
            "c.d\nExpected: \nActual: 'd'\n\n"
            "c.e\nExpected: 'e2'\nActual: 'e'\n\n"
        )

    def test_repeated_calls_do_not_accumulate(self) -> None:
        expectation = JsonExpectation([1])
        expectation.matches([2])
        assert expectation.failure_message() == expectation.failure_message()

    def test_before_matches_raises(self) -> None:
        with pytest.raises(ExpectationStateError, match="matches\\(\\) must be called"):
            JsonExpectation(1).failure_message()

    def test_negated_message(self) -> None:
        expectation = JsonExpectation({"a": 1})
        expectation.matches({"a": 1})
        assert expectation.negated_failure_message() == (
            "Expected: {'a': 1}\n\nnot to equal: {'a': 1}\n"
        )

    def test_negated_before_matches_raises(self) -> None:
        with pytest.raises(ExpectationStateError):
            JsonExpectation(1).negated_failure_message()


class TestLaziness:
    def test_matches_never_builds_report(self) -> None:
        with mock.patch("json_eql_diff.expectation.build_report") as build:
            expectation = JsonExpectation({"a": [1, 2]})
            assert expectation.matches({"a": [1, 2]})
            assert not expectation.matches({"a": [1, 3]})
        build.assert_not_called()

    def test_report_built_once_per_match(self) -> None:
        expectation = JsonExpectation({"a": 1})
        expectation.matches({"a": 2})
        with mock.patch(
            "json_eql_diff.expectation.build_report",
            wraps=report_module.build_report,
        ) as build:
            expectation.failure_message()
            expectation.failure_message()
        assert build.call_count == 1

    def test_matches_resets_cached_report(self) -> None:
        expectation = JsonExpectation({"a": 1})
        expectation.matches({"a": 2})
        assert expectation.report().paths == ["a"]
        expectation.matches({"b": 1})
        assert expectation.report().paths == ["a", "b"]


class TestPythonEquality:
    def test_eq_on_both_sides(self) -> None:
        assert {"a": 1} == JsonExpectation({"a": 1})
        assert JsonExpectation([1]) == [1]

    def test_ne(self) -> None:
        assert "a" != JsonExpectation("b")

    def test_eq_records_actual(self) -> None:
        expectation = JsonExpectation({"a": 1})
        assert [1] != expectation
        assert expectation.actual == [1]

    def test_non_json_operand_is_unequal(self) -> None:
        expectation = JsonExpectation({"a": 1})
        assert (expectation == object()) is False
        assert (expectation != object()) is True

    def test_membership_with_non_json_items(self) -> None:
        assert JsonExpectation([1]) in [object(), {1, 2}, [1]]

    def test_matches_stays_strict(self) -> None:
        with pytest.raises(UnsupportedValueError):
            JsonExpectation(1).matches(object())

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(JsonExpectation(1))

    def test_repr(self) -> None:
        assert repr(JsonExpectation({"a": 1})) == "eql_json({'a': 1})"


class TestMatcherProtocol:
    def test_conforms(self) -> None:
        assert isinstance(JsonExpectation(1), Matcher)

    def test_plain_object_does_not_conform(self) -> None:
        assert not isinstance(object(), Matcher)
