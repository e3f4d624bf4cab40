"""Path addressing into nested JSON values.

A path is a tuple of segments: ``str`` segments are object keys and ``int``
segments are array indices.  Its text form joins keys with ``.`` and wraps
indices in brackets, e.g. ``("c", "f", 1, "h2")`` <-> ``"c.f[1].h2"``.

Parsing classifies every token that looks like a non-negative integer without
a leading zero (or exactly ``"0"``) as an index.  An object key that is purely
numeric therefore cannot be told apart from an index once serialized; such
keys resolve to UNDEFINED rather than to their value.  ``lookup`` walks a
segment tuple directly and has no such ambiguity.
"""

from __future__ import annotations

import re
from typing import Any, Final

from json_eql_diff.errors import PathError

__all__ = [
    "UNDEFINED",
    "Path",
    "Segment",
    "Undefined",
    "child_path",
    "lookup",
    "parse",
    "resolve",
    "serialize",
]

Segment = str | int
Path = tuple[Segment, ...]

_DELIMITERS = re.compile(r"[.\[\]]")
_INDEX_TOKEN = re.compile(r"0|[1-9][0-9]*")


class Undefined:
    """Marker for a path that does not resolve to any value.

    Distinct from ``None``, which is JSON null.  Falsy, and there is only
    ever one instance (``UNDEFINED``).
    """

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = Undefined()


def serialize(path: Path) -> str:
    """Render a path as text.

    Keys are joined with ``.`` (no leading dot before the first segment) and
    indices are wrapped in ``[]``.  The empty path renders as ``""``.

    Example::

        serialize(("c", "f", 1, "h2"))   # "c.f[1].h2"
        serialize((2,))                  # "[2]"
    """
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(segment)
    return "".join(parts)


def parse(text: str) -> Path:
    """Split path text into segments.

    Empty tokens (from leading brackets or doubled delimiters) are dropped.
    """
    segments: list[Segment] = []
    for token in _DELIMITERS.split(text):
        if token == "":
            continue
        if _INDEX_TOKEN.fullmatch(token):
            segments.append(int(token))
        else:
            segments.append(token)
    return tuple(segments)


def child_path(prefix: Path, name: Path) -> Path:
    """Extend a path prefix with a relative path."""
    return prefix + name


def resolve(root: Any, text: str, *, strict: bool = False) -> Any:
    """Fetch the value at ``text`` inside ``root``.

    Args:
        root:   The JSON value to walk.
        text:   Path text such as ``"gamma[0].i"``.  ``""`` addresses the root.
        strict: When True, addressing into a scalar raises PathError instead
                of resolving to UNDEFINED.

    Returns:
        The addressed value, or ``UNDEFINED`` if any segment is absent.

    Raises:
        PathError: Only when ``strict`` is True and an intermediate value is
            a scalar.
    """
    try:
        return _walk(root, parse(text), text)
    except PathError:
        if strict:
            raise
        return UNDEFINED


def lookup(root: Any, path: Path) -> Any:
    """Fetch the value at a segment tuple inside ``root``.

    No text round-trip happens, so a key containing ``.`` or a purely numeric
    key is addressed exactly.  Absent segments and scalars along the way both
    yield ``UNDEFINED``.
    """
    try:
        return _walk(root, path, serialize(path))
    except PathError:
        return UNDEFINED


def _walk(root: Any, path: Path, text: str) -> Any:
    current = root
    for segment in path:
        if isinstance(current, dict):
            # Object keys are always strings; an index segment never matches.
            if segment not in current:
                return UNDEFINED
            current = current[segment]
        elif isinstance(current, list):
            if not isinstance(segment, int) or segment >= len(current):
                return UNDEFINED
            current = current[segment]
        else:
            raise PathError(text, segment)
    return current
