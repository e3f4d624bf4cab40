"""JsonExpectation: exact JSON equality with a lazily built difference report.

The expectation follows the matcher protocol used by test hosts: ``matches()``
decides pass/fail with a plain deep-equality check, and only when the host
asks for ``failure_message()`` is the (potentially expensive) difference
report built.  A passing comparison never touches the report builder.

Example::

    from json_eql_diff import eql_json

    expectation = eql_json({"a": 1, "b": {"c": 2}})
    if not expectation.matches({"a": 1, "b": {"c": 3}}):
        print(expectation.failure_message())
        # Expected: {'a': 1, 'b': {'c': 2}}
        #
        # Actual: {'a': 1, 'b': {'c': 3}}
        #
        # Differences
        #
        # b.c
        # Expected: 2
        # Actual: 3
"""

from __future__ import annotations

import logging
from typing import Any

from json_eql_diff.algorithm.config import EqlJsonConfig
from json_eql_diff.algorithm.report import DiffReport, build_report
from json_eql_diff.errors import ExpectationStateError, UnsupportedValueError
from json_eql_diff.tree.paths import UNDEFINED
from json_eql_diff.tree.values import values_equal

__all__ = ["JsonExpectation"]

logger = logging.getLogger(__name__)


class JsonExpectation:
    """Matcher asserting that an actual JSON value equals an expected one.

    Instances hold the expected value, the last actual value passed to
    ``matches()`` and the report built for it.  Nothing is shared between
    instances, so expectations can be evaluated from parallel test workers.

    Example::

        assert {"a": 1} == JsonExpectation({"a": 1})
    """

    #: The expectation renders its own diff; hosts should not add another.
    diffable = False

    def __init__(self, expected: Any, config: EqlJsonConfig | None = None) -> None:
        self.expected = expected
        self._config: EqlJsonConfig = config if config is not None else EqlJsonConfig()
        self._actual: Any = UNDEFINED
        self._report: DiffReport | None = None

    # ------------------------------------------------------------------
    # Matcher protocol
    # ------------------------------------------------------------------

    @property
    def actual(self) -> Any:
        """The value passed to the last ``matches()`` call (UNDEFINED before)."""
        return self._actual

    def matches(self, actual: Any) -> bool:
        """Return True if ``actual`` deep-equals the expected value.

        Resets any report built for a previous actual value.
        """
        self._actual = actual
        self._report = None
        return values_equal(
            self.expected, actual, self._config.strict_number_types
        )

    def report(self) -> DiffReport:
        """Return the difference report for the last ``matches()`` call.

        Built on first access and reused until ``matches()`` runs again.

        Raises:
            ExpectationStateError: If ``matches()`` has not been called.
        """
        self._require_actual()
        if self._report is None:
            logger.debug("Building difference report for %r", self.expected)
            self._report = build_report(self._actual, self.expected, self._config)
        return self._report

    def failure_message(self) -> str:
        """Full failure text: both values, then only the differing paths.

        Raises:
            ExpectationStateError: If ``matches()`` has not been called.
        """
        report = self.report()
        return (
            f"Expected: {self.expected}\n\n"
            f"Actual: {self._actual}\n\n"
            "Differences\n\n"
            f"{report.render()}"
        )

    def negated_failure_message(self) -> str:
        """Failure text for a negated assertion (values were equal).

        Raises:
            ExpectationStateError: If ``matches()`` has not been called.
        """
        self._require_actual()
        return f"Expected: {self._actual}\n\nnot to equal: {self.expected}\n"

    # ------------------------------------------------------------------
    # Python comparison support
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        # Non-JSON operands are simply unequal here; matches() stays strict.
        try:
            return self.matches(other)
        except UnsupportedValueError:
            return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"eql_json({self.expected!r})"

    def _require_actual(self) -> None:
        if self._actual is UNDEFINED:
            msg = "matches() must be called before requesting a failure message"
            raise ExpectationStateError(msg)
