"""
Diagnostic records produced by comparisons and round-trip checks.

Provides the Diagnostic dataclass, the DiagnosticKind enum, and the constructors that fix
the exact message text for each kind of problem. This module is zero-IO.

Message formats
- mismatch:          ``<path> mismatch. <left> vs. <right>``
- parse_error:       ``error unmarshalling json<N>: <parse error>``
- decode_error:      ``error decoding json in <source>: <decode error>``
- invalid_argument:  ``<InvalidArgumentError message>``
- resource_error:    ``open <source>: <cause>``
- summary:           ``*** <N> errors in <source>``

Rendering
- Absent and null values render as ``nil``.
- Strings render JSON-quoted (``"val"``).
- Numbers render in shortest form; integral values have no fraction (``1``, ``0.5``).
- Booleans, arrays and objects render as canonical compact JSON (sorted keys).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .serde import json_dumps_canonical
from .value import JsonValue, is_nil, to_python

__all__ = [
    "DiagnosticKind",
    "Diagnostic",
    "NIL",
    "ROOT_LABEL",
    "render",
    "mismatch",
    "parse_error",
    "decode_error",
    "invalid_argument",
    "resource_error",
    "summary",
]

NIL = "nil"
# Shown in place of the empty path when the top-level values themselves differ.
ROOT_LABEL = "<root>"


class DiagnosticKind(Enum):
    MISMATCH = "mismatch"
    PARSE_ERROR = "parse_error"
    DECODE_ERROR = "decode_error"
    INVALID_ARGUMENT = "invalid_argument"
    RESOURCE_ERROR = "resource_error"
    SUMMARY = "summary"


@dataclass(frozen=True)
class Diagnostic:
    """
    One reported problem.

    Attributes:
        kind (DiagnosticKind): What went wrong.
        message (str): Full human-readable message; also what ``str()`` returns.
        path (str | None): Location path for mismatches (``""`` is the document root).
        left (str | None): Rendered left-hand value for mismatches.
        right (str | None): Rendered right-hand value for mismatches.
    """

    kind: DiagnosticKind
    message: str
    path: str | None = None
    left: str | None = None
    right: str | None = None

    def __str__(self) -> str:
        return self.message


def render(value: JsonValue | None) -> str:
    """
    Render a value for a mismatch message.

    Examples:
        >>> from jsonassert.core.value import parse
        >>> render(None)
        'nil'
        >>> render(parse('"val"'))
        '"val"'
        >>> render(parse('{"b": [1, 2.5], "a": true}'))
        '{"a":true,"b":[1,2.5]}'
    """
    if is_nil(value):
        return NIL
    return json_dumps_canonical(to_python(value))


def mismatch(path: str, left: JsonValue | None, right: JsonValue | None) -> Diagnostic:
    """
    Build a ``"<path> mismatch. <left> vs. <right>"`` diagnostic.

    Notes:
        An empty path (a mismatch at the document root) is shown as ``<root>`` in the
        message only; ``Diagnostic.path`` keeps the empty string.

    Examples:
        >>> d = mismatch("", None, None)
        >>> d.message, d.path
        ('<root> mismatch. nil vs. nil', '')
    """
    lrepr, rrepr = render(left), render(right)
    label = path or ROOT_LABEL
    return Diagnostic(
        kind=DiagnosticKind.MISMATCH,
        message=f"{label} mismatch. {lrepr} vs. {rrepr}",
        path=path,
        left=lrepr,
        right=rrepr,
    )


def parse_error(side: int, err: Exception) -> Diagnostic:
    """Diagnostic for a document that failed to parse; ``side`` is 1 (left) or 2 (right)."""
    return Diagnostic(
        kind=DiagnosticKind.PARSE_ERROR,
        message=f"error unmarshalling json{side}: {err}",
    )


def decode_error(source: str, err: Exception) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.DECODE_ERROR,
        message=f"error decoding json in {source}: {err}",
    )


def invalid_argument(err: Exception) -> Diagnostic:
    return Diagnostic(kind=DiagnosticKind.INVALID_ARGUMENT, message=str(err))


def resource_error(err: Exception) -> Diagnostic:
    return Diagnostic(kind=DiagnosticKind.RESOURCE_ERROR, message=str(err))


def summary(count: int, source: str) -> Diagnostic:
    return Diagnostic(kind=DiagnosticKind.SUMMARY, message=f"*** {count} errors in {source}")
