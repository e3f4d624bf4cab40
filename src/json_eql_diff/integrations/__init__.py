"""Integrations subpackage for json-eql-diff.

Contains integration adapters for external test frameworks:
- pytest plugin (auto-discovered via pytest11 entry point)
"""

from __future__ import annotations

__all__: list[str] = []
