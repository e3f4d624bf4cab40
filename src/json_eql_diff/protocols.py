"""Matcher Protocol: the surface a test host needs from an expectation.

Any object with conformant ``matches``, ``failure_message`` and
``negated_failure_message`` methods passes ``isinstance`` checks -- no
inheritance required.

Example::

    from json_eql_diff import eql_json
    from json_eql_diff.protocols import Matcher

    assert isinstance(eql_json({"a": 1}), Matcher)  # True
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["Matcher"]


@runtime_checkable
class Matcher(Protocol):
    """Structural protocol for expectation objects.

    The host must call ``matches`` before either message method; the messages
    describe the value passed to the most recent ``matches`` call.
    """

    def matches(self, actual: Any) -> bool: ...

    def failure_message(self) -> str: ...

    def negated_failure_message(self) -> str: ...
