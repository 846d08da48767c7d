"""
Exception types raised by parsing, target resolution, and source reading.

Provides typed exceptions for jsonassert failures:
- ParseError for malformed JSON text or an unsupported top-level shape.
- InvalidArgumentError for round-trip targets that cannot represent a JSON object or array.
- ResourceError for sources that cannot be opened or read.
- EquivalenceError for the assertion helpers in jsonassert.testing.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - The comparison and round-trip entry points catch ParseError, InvalidArgumentError and
      ResourceError and turn them into diagnostics; callers of those entry points never see
      them. Lower-level helpers (jsonassert.core.value.parse, RoundTripTarget.for_type,
      jsonassert.io.fs.read_source) raise them directly.
    - Shape mismatches are never exceptions. They are reported as mismatch diagnostics.

Examples:
    Catch a parse failure.

    >>> from jsonassert.core.errors import ParseError
    >>> from jsonassert.core.value import parse
    >>> try:
    ...     parse(b"{")
    ... except ParseError as e:
    ...     msg = str(e)
    >>> "Expecting" in msg
    True
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .diagnostics import Diagnostic

__all__ = [
    "JsonAssertError",
    "ParseError",
    "InvalidArgumentError",
    "ResourceError",
    "EquivalenceError",
]


class JsonAssertError(Exception):
    """Base class for all jsonassert errors."""


class ParseError(JsonAssertError, ValueError):
    """Malformed JSON text, or a top-level value of the wrong shape."""


class InvalidArgumentError(JsonAssertError, TypeError):
    """Round-trip target is not an object-like or array-like container type."""


class ResourceError(JsonAssertError, OSError):
    """
    Source could not be opened or read.

    Notes:
        Always raised from the underlying OSError so the cause is kept on ``__cause__``.
    """


class EquivalenceError(JsonAssertError, AssertionError):
    """
    Two documents are not equivalent (raised by the assertion helpers only).

    Attributes:
        diagnostics (tuple[Diagnostic, ...]): Every diagnostic produced by the check,
            in report order.
    """

    def __init__(self, diagnostics: Sequence[Diagnostic]) -> None:
        self.diagnostics = tuple(diagnostics)
        lines = [str(d) for d in self.diagnostics]
        super().__init__("\n".join(lines))
