"""Tests for the EqlJsonConfig frozen dataclass.

Covers:
- Default values
- Immutability (FrozenInstanceError on assignment)
- Validation of field types and the non-empty placeholder
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_eql_diff.algorithm.config import (
    DEFAULT_INVALID_JSON_PLACEHOLDER,
    EqlJsonConfig,
)


class TestEqlJsonConfigDefaults:
    def test_default_strict_number_types(self) -> None:
        assert EqlJsonConfig().strict_number_types is False

    def test_default_placeholder(self) -> None:
        config = EqlJsonConfig()
        assert config.invalid_json_placeholder == DEFAULT_INVALID_JSON_PLACEHOLDER
        assert config.invalid_json_placeholder == "< INVALID JSON RESPONSE >"


class TestEqlJsonConfigImmutability:
    def test_assignment_raises(self) -> None:
        config = EqlJsonConfig()
        with pytest.raises(FrozenInstanceError):
            config.strict_number_types = True  # type: ignore[misc]

    def test_equal_configs_compare_equal(self) -> None:
        assert EqlJsonConfig(strict_number_types=True) == EqlJsonConfig(
            strict_number_types=True
        )


class TestEqlJsonConfigValidation:
    def test_custom_values(self) -> None:
        config = EqlJsonConfig(strict_number_types=True, invalid_json_placeholder="?")
        assert config.strict_number_types is True
        assert config.invalid_json_placeholder == "?"

    def test_non_bool_strict_number_types(self) -> None:
        with pytest.raises(ValueError, match="strict_number_types must be a bool"):
            EqlJsonConfig(strict_number_types="yes")  # type: ignore[arg-type]

    def test_non_str_placeholder(self) -> None:
        with pytest.raises(ValueError, match="invalid_json_placeholder must be a str"):
            EqlJsonConfig(invalid_json_placeholder=None)  # type: ignore[arg-type]

    def test_empty_placeholder(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            EqlJsonConfig(invalid_json_placeholder="")
