"""Exception hierarchy for json-eql-diff.

Only a handful of conditions ever surface to callers. Missing paths and kind
mismatches found while building a report are not errors: they degrade to an
empty rendering or to a leaf entry respectively.
"""

from __future__ import annotations

__all__ = [
    "ExpectationStateError",
    "JsonEqlDiffError",
    "PathError",
    "UnsupportedValueError",
]


class JsonEqlDiffError(Exception):
    """Base class for all json-eql-diff errors."""


class UnsupportedValueError(JsonEqlDiffError, TypeError):
    """Raised when a value outside the JSON value model is compared."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unsupported JSON value type: {type(value)!r}")


class PathError(JsonEqlDiffError, LookupError):
    """Raised when a path addresses into a scalar value.

    Attributes:
        path_text: The full path text that was being resolved.
        segment:   The segment that could not be applied.
    """

    def __init__(self, path_text: str, segment: str | int) -> None:
        self.path_text = path_text
        self.segment = segment
        super().__init__(
            f"Cannot address segment {segment!r} of path {path_text!r}: "
            f"parent value is not an object or array"
        )


class ExpectationStateError(JsonEqlDiffError, RuntimeError):
    """Raised when a failure message is requested before ``matches()`` ran."""
