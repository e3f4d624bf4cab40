"""Public API functions for json-eql-diff.

Every call creates a fresh JsonExpectation (or report) so no state is shared
between calls.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from json_eql_diff.algorithm.config import EqlJsonConfig
from json_eql_diff.algorithm.report import DiffReport, build_report
from json_eql_diff.expectation import JsonExpectation

__all__ = ["assert_eql_json", "diff_report", "eql_json", "json_response"]

logger = logging.getLogger(__name__)


def eql_json(expected: Any, config: EqlJsonConfig | None = None) -> JsonExpectation:
    """Return an expectation that matches values deep-equal to ``expected``.

    Example::

        assert response_json == eql_json({"id": 1, "tags": ["a"]})

    Args:
        expected: The expected JSON value.
        config:   Equality settings. Defaults to ``EqlJsonConfig()`` when None.
    """
    return JsonExpectation(expected, config=config)


def assert_eql_json(
    actual: Any,
    expected: Any,
    config: EqlJsonConfig | None = None,
) -> None:
    """Assert that two JSON values are structurally identical.

    Args:
        actual:   The JSON value produced by the code under test.
        expected: The expected JSON value.
        config:   Equality settings. Defaults to ``EqlJsonConfig()`` when None.

    Raises:
        AssertionError: When the values differ.  The message lists both values
            followed by one block per differing path.
    """
    expectation = JsonExpectation(expected, config=config)
    if not expectation.matches(actual):
        raise AssertionError(expectation.failure_message())


def diff_report(
    actual: Any,
    expected: Any,
    config: EqlJsonConfig | None = None,
) -> DiffReport:
    """Return the difference report between two JSON values.

    The report is empty when the values are equal.
    """
    return build_report(actual, expected, config=config)


def json_response(response: Any, config: EqlJsonConfig | None = None) -> Any:
    """Parse a response body as JSON.

    Accepts the body itself (``str``, ``bytes`` or ``bytearray``) or any
    response object exposing it as ``content``, ``data`` or ``text`` (requests,
    httpx, Django and Flask test responses all qualify).

    Args:
        response: Response object or raw body.
        config:   Supplies the placeholder for invalid bodies.

    Returns:
        The decoded JSON value, or ``config.invalid_json_placeholder`` when the
        body is not valid JSON.

    Raises:
        TypeError: If no body can be found on ``response``.
    """
    cfg = config if config is not None else EqlJsonConfig()
    body = _response_body(response)
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("Response body is not valid JSON: %.200r", body)
        return cfg.invalid_json_placeholder


def _response_body(response: Any) -> str | bytes | bytearray:
    if isinstance(response, (str, bytes, bytearray)):
        return response
    for attribute in ("content", "data", "text"):
        body = getattr(response, attribute, None)
        if isinstance(body, (str, bytes, bytearray)):
            return body
    msg = f"Cannot read a response body from {type(response).__name__!r}"
    raise TypeError(msg)
