"""
Test-suite integration: forward diagnostics to a reporter, or raise on failure.

Two styles are supported:

- Reporter style. Any object with ``error(*args)`` and ``errorf(fmt, *args)`` receives one
  call per diagnostic; the reporter decides how a failure is signalled. ``equal``,
  ``equal_arrays`` and ``struct_check`` return True when nothing was reported.
- Assertion style. ``assert_json_equivalent`` and ``assert_round_trip`` raise
  EquivalenceError (an AssertionError) whose message lists every diagnostic, which pytest
  shows as a normal assertion failure.

Examples:
    >>> from jsonassert.testing import RecordingReporter, equal
    >>> t = RecordingReporter()
    >>> equal(t, b'{"a": 1}', b'{"a": 2}')
    False
    >>> t.messages
    ['a mismatch. 1 vs. 2']
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from jsonassert.core.compare import compare_arrays, compare_objects
from jsonassert.core.diagnostics import Diagnostic
from jsonassert.core.errors import EquivalenceError
from jsonassert.io.config import AssertSettings
from jsonassert.io.roundtrip import Shape, check_round_trip

__all__ = [
    "Reporter",
    "RecordingReporter",
    "report",
    "equal",
    "equal_arrays",
    "struct_check",
    "assert_json_equivalent",
    "assert_round_trip",
]


@runtime_checkable
class Reporter(Protocol):
    """Receives failure messages; owns how a test is marked as failed."""

    def error(self, *args: Any) -> None: ...

    def errorf(self, fmt: str, *args: Any) -> None: ...


class RecordingReporter:
    """
    Reporter that keeps every message in order.

    Attributes:
        messages (list[str]): Reported messages, oldest first.
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def error(self, *args: Any) -> None:
        self.messages.append(" ".join(str(a) for a in args))

    def errorf(self, fmt: str, *args: Any) -> None:
        self.messages.append(fmt % args if args else fmt)

    @property
    def failed(self) -> bool:
        return bool(self.messages)


def report(t: Reporter, diagnostics: Iterable[Diagnostic]) -> bool:
    """Send each diagnostic to ``t.error``; return True if there were none."""
    ok = True
    for d in diagnostics:
        t.error(d.message)
        ok = False
    return ok


def equal(t: Reporter, json1: bytes | str, json2: bytes | str) -> bool:
    """Compare two object documents and report any mismatches to ``t``."""
    return report(t, compare_objects(json1, json2))


def equal_arrays(t: Reporter, json1: bytes | str, json2: bytes | str) -> bool:
    """Compare two array documents and report any mismatches to ``t``."""
    return report(t, compare_arrays(json1, json2))


def struct_check(
    t: Reporter,
    source: str | os.PathLike[str],
    target: Any,
    *,
    settings: AssertSettings | None = None,
) -> bool:
    """
    Round-trip ``source`` through ``target`` and report any problems to ``t``.

    Useful for checking that the models an application decodes JSON into can losslessly
    decode and encode that JSON.
    """
    return report(t, check_round_trip(source, target, settings=settings))


def assert_json_equivalent(
    json1: bytes | str, json2: bytes | str, *, shape: Shape = Shape.OBJECT
) -> None:
    """
    Raise EquivalenceError unless the two documents are equivalent.

    Args:
        json1 (bytes | str): Expected JSON text.
        json2 (bytes | str): Actual JSON text.
        shape (Shape): Top-level shape both documents must have.
    """
    if shape is Shape.ARRAY:
        out = compare_arrays(json1, json2)
    else:
        out = compare_objects(json1, json2)
    if out:
        raise EquivalenceError(out)


def assert_round_trip(
    source: str | os.PathLike[str],
    target: Any,
    *,
    settings: AssertSettings | None = None,
) -> None:
    """Raise EquivalenceError unless ``source`` survives a round trip through ``target``."""
    out = check_round_trip(source, target, settings=settings)
    if out:
        raise EquivalenceError(out)
