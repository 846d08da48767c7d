"""
Core package for jsonassert (value model, equivalence engine, diagnostics, errors, serde).

## Contracts
- Value model — immutable tagged union over null/boolean/number/string/array/object.
- Equivalence engine — recursive comparison with the nil-equals-zero-value relaxation.
- Diagnostics — ordered, deterministic records with fixed message formats.
- Errors — ParseError, InvalidArgumentError, ResourceError, EquivalenceError.

## Notes
- Zero-IO policy: stdlib only; no file or network IO.
- Absent values are ``None``; JSON null is ``Null``. Both are "nil" when comparing.
- Object keys are always visited in sorted order.

## Downstream usage
- jsonassert.io.roundtrip — parses original and re-encoded bytes and calls the engine.
- jsonassert.testing — forwards diagnostics to a test reporter or raises EquivalenceError.

## Examples
```python
from jsonassert.core import compare_objects

compare_objects(b'{"a": [], "b": false}', b'{}')  # []
[str(d) for d in compare_objects(b'{"arr": [1, 2, 3]}', b'{"arr": [1, 2]}')]
# ['arr mismatch. [1,2,3] vs. [1,2]']
```
"""

from __future__ import annotations

from .compare import compare, compare_arrays, compare_objects
from .diagnostics import Diagnostic, DiagnosticKind
from .errors import (
    EquivalenceError,
    InvalidArgumentError,
    JsonAssertError,
    ParseError,
    ResourceError,
)
from .value import JsonValue, is_empty, parse

__all__ = [
    "compare",
    "compare_objects",
    "compare_arrays",
    "Diagnostic",
    "DiagnosticKind",
    "JsonAssertError",
    "ParseError",
    "InvalidArgumentError",
    "ResourceError",
    "EquivalenceError",
    "JsonValue",
    "is_empty",
    "parse",
]
