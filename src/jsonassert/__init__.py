"""
jsonassert — semantic equivalence checks for JSON documents in test suites.

Two JSON documents are compared structurally rather than textually. A value that is
absent or null on one side is accepted as equal to the zero value of the other side
(``""``, ``0``, ``false``, ``[]``, an empty object), because producers of JSON frequently
omit fields or emit nulls where another encoder would write a zero value.

## Public API
- compare_objects / compare_arrays — compare raw JSON documents, return diagnostics.
- check_round_trip — decode a JSON file into a typed container, re-encode it, compare.
- AssertSettings — options for round-trip checks (env/TOML configurable).
- jsonassert.testing — reporter and assertion helpers for test suites.

## Examples
```python
from pydantic import BaseModel
from jsonassert import check_round_trip, compare_objects

compare_objects(b'{"a": ""}', b'{}')  # []

class Sub(BaseModel):
    a: str = ""
    b: str = ""

[str(d) for d in check_round_trip("testdata/complete.json", Sub)]
# ['*** 6 errors in testdata/complete.json', 'arr mismatch. ["1","2","3"] vs. nil', ...]
```
"""

from __future__ import annotations

from .core.compare import compare, compare_arrays, compare_objects
from .core.diagnostics import Diagnostic, DiagnosticKind
from .core.errors import (
    EquivalenceError,
    InvalidArgumentError,
    JsonAssertError,
    ParseError,
    ResourceError,
)
from .io.config import AssertSettings
from .io.roundtrip import RoundTripTarget, Shape, check_round_trip, check_round_trip_bytes

__version__ = "0.1.0"

__all__ = [
    "compare",
    "compare_objects",
    "compare_arrays",
    "check_round_trip",
    "check_round_trip_bytes",
    "RoundTripTarget",
    "Shape",
    "AssertSettings",
    "Diagnostic",
    "DiagnosticKind",
    "JsonAssertError",
    "ParseError",
    "InvalidArgumentError",
    "ResourceError",
    "EquivalenceError",
]
