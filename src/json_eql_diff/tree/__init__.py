"""Tree subpackage: the JSON value model and path addressing primitives.

Re-exports the public API for the tree module:
- ValueKind: StrEnum of the six JSON value kinds
- kind_of / values_equal: kind dispatch and structural deep equality
- serialize / parse / resolve / lookup: path text encoding and lookup
- UNDEFINED: marker returned for paths that do not resolve
"""

from json_eql_diff.tree.paths import (
    UNDEFINED,
    Path,
    Segment,
    Undefined,
    lookup,
    parse,
    resolve,
    serialize,
)
from json_eql_diff.tree.values import JsonValue, ValueKind, kind_of, values_equal

__all__ = [
    "UNDEFINED",
    "JsonValue",
    "Path",
    "Segment",
    "Undefined",
    "ValueKind",
    "kind_of",
    "lookup",
    "parse",
    "resolve",
    "serialize",
    "values_equal",
]
