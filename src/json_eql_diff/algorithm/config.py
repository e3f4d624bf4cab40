"""EqlJsonConfig: immutable settings for equality checks and body parsing.

EqlJsonConfig is a frozen (immutable) dataclass.  The pytest plugin builds one
from ini options; library callers may pass their own instance to any public
function.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_INVALID_JSON_PLACEHOLDER", "EqlJsonConfig"]

DEFAULT_INVALID_JSON_PLACEHOLDER = "< INVALID JSON RESPONSE >"


@dataclass(frozen=True, slots=True)
class EqlJsonConfig:
    """Immutable configuration for json-eql-diff.

    Attributes:
        strict_number_types: When True, ``int`` and ``float`` values never
            compare equal (``1`` vs ``1.0`` is reported as a difference).
            Default False: numbers compare numerically.
        invalid_json_placeholder: Value returned by ``json_response()`` when a
            body is not valid JSON.  Must be a non-empty string.
    """

    strict_number_types: bool = False
    invalid_json_placeholder: str = DEFAULT_INVALID_JSON_PLACEHOLDER

    def __post_init__(self) -> None:
        if not isinstance(self.strict_number_types, bool):
            msg = (
                "strict_number_types must be a bool, "
                f"got {type(self.strict_number_types).__name__}"
            )
            raise ValueError(msg)
        if not isinstance(self.invalid_json_placeholder, str):
            msg = (
                "invalid_json_placeholder must be a str, "
                f"got {type(self.invalid_json_placeholder).__name__}"
            )
            raise ValueError(msg)
        if not self.invalid_json_placeholder:
            msg = "invalid_json_placeholder must not be empty"
            raise ValueError(msg)
