"""
Equivalence engine: structural comparison of two JSON values.

Two documents are equivalent when every value matches by type and content, with one
relaxation: an absent or null value equals the zero value of the other side's type
(``""``, ``0``, ``false``, ``[]``, or an object whose values are all empty).

Responsibilities
- Walk two JsonValue trees and emit one mismatch Diagnostic per disagreeing location.
- Keep output deterministic: object keys in sorted order, array elements in index order.
- Provide byte-level entry points that report parse failures as diagnostics.

Rules (dispatch on the left value)
- Object: compare left keys (sorted) against the right value for the same key, then keys
  found only on the right (sorted) against nil. A non-object, non-nil right value is a
  single mismatch with no descent.
- Bool / Number / String: equal if the right value is identical, or the left value is the
  zero value (false / 0 / "") and the right value is nil.
- Nil: equal only if the right value is recursively empty.
- Array: the right value must be an array (nil counts as length 0) of the same length,
  otherwise a single mismatch with no descent; equal lengths compare element-wise.

Paths
- Object keys are joined with ``.`` (``obj.a``); array indices append ``[i]``
  (``arr[0].item1``). The root path is ``""``.

Examples:
    >>> from jsonassert.core.compare import compare_objects
    >>> compare_objects(b'{"a": "", "b": 0}', b'{}')
    []
    >>> [str(d) for d in compare_objects(b'{"obj": {"a": "val", "b": "val2"}}', b'{"obj": {"a": "val"}}')]
    ['obj.b mismatch. "val2" vs. nil']
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar, assert_never

from . import diagnostics
from .diagnostics import Diagnostic
from .errors import ParseError
from .value import (
    Array,
    Bool,
    JsonValue,
    Null,
    Number,
    Object,
    String,
    is_empty,
    is_nil,
    parse_array,
    parse_object,
)

__all__ = [
    "compare",
    "compare_objects",
    "compare_arrays",
    "join_key",
    "join_index",
]

logger = logging.getLogger(__name__)

_RootT = TypeVar("_RootT", Object, Array)


def join_key(path: str, key: str) -> str:
    """Extend a location path with an object key."""
    if path == "":
        return key
    return f"{path}.{key}"


def join_index(path: str, index: int) -> str:
    """Extend a location path with an array index."""
    return f"{path}[{index}]"


class _Walker:
    """
    Accumulates diagnostics for one comparison; discarded when it returns.

    Work is kept on an explicit stack of (path, left, right) tasks. Children are pushed in
    reverse so they are popped in traversal order, which keeps the output identical to a
    depth-first walk without consuming interpreter stack per nesting level.
    """

    def __init__(self) -> None:
        self.out: list[Diagnostic] = []
        self.pending: list[tuple[str, JsonValue | None, JsonValue | None]] = []

    def run(self, path: str, left: JsonValue | None, right: JsonValue | None) -> list[Diagnostic]:
        self.pending.append((path, left, right))
        while self.pending:
            self.values(*self.pending.pop())
        return self.out

    def fail(self, path: str, left: JsonValue | None, right: JsonValue | None) -> None:
        self.out.append(diagnostics.mismatch(path, left, right))

    def schedule(self, tasks: list[tuple[str, JsonValue | None, JsonValue | None]]) -> None:
        self.pending.extend(reversed(tasks))

    def values(self, path: str, left: JsonValue | None, right: JsonValue | None) -> None:
        if left is None or isinstance(left, Null):
            if not is_empty(right):
                self.fail(path, left, right)
        elif isinstance(left, Bool):
            if not (_same(left, right, Bool) or (left.value is False and is_nil(right))):
                self.fail(path, left, right)
        elif isinstance(left, Number):
            if not (_same(left, right, Number) or (left.value == 0.0 and is_nil(right))):
                self.fail(path, left, right)
        elif isinstance(left, String):
            if not (_same(left, right, String) or (left.value == "" and is_nil(right))):
                self.fail(path, left, right)
        elif isinstance(left, Object):
            if isinstance(right, Object):
                self.objects(path, left, right)
            elif is_nil(right):
                self.objects(path, left, None)
            else:
                self.fail(path, left, right)
        elif isinstance(left, Array):
            self.arrays(path, left, right)
        else:
            assert_never(left)

    def objects(self, path: str, left: Object, right: Object | None) -> None:
        rmembers = right.members if right is not None else {}
        tasks = [
            (join_key(path, key), left.members[key], rmembers.get(key))
            for key in left.sorted_keys()
        ]
        # Keys present on both sides were handled above; only right-only keys remain.
        if right is not None:
            tasks.extend(
                (join_key(path, key), None, right.members[key])
                for key in right.sorted_keys()
                if key not in left.members
            )
        self.schedule(tasks)

    def arrays(self, path: str, left: Array, right: JsonValue | None) -> None:
        if isinstance(right, Array):
            ritems = right.items
        elif is_nil(right):
            ritems = ()
        else:
            self.fail(path, left, right)
            return
        if len(left.items) != len(ritems):
            self.fail(path, left, right)
            return
        self.schedule(
            [
                (join_index(path, i), litem, ritem)
                for i, (litem, ritem) in enumerate(zip(left.items, ritems))
            ]
        )


def _same(left: JsonValue, right: JsonValue | None, cls: type) -> bool:
    return isinstance(right, cls) and right.value == left.value  # type: ignore[attr-defined]


def compare(path: str, left: JsonValue | None, right: JsonValue | None) -> list[Diagnostic]:
    """
    Compare two values rooted at ``path`` under the nil-equivalence rule.

    Args:
        path (str): Location prefix for emitted diagnostics (``""`` at the top level).
        left (JsonValue | None): Expected value; ``None`` means absent.
        right (JsonValue | None): Actual value; ``None`` means absent.

    Returns:
        list[Diagnostic]: Mismatch diagnostics in traversal order; empty when equivalent.
    """
    return _Walker().run(path, left, right)


def _compare_documents(
    json1: bytes | str,
    json2: bytes | str,
    parse_root: Callable[[bytes | str], _RootT],
) -> list[Diagnostic]:
    roots: list[_RootT] = []
    errors: list[Diagnostic] = []
    for side, text in ((1, json1), (2, json2)):
        try:
            roots.append(parse_root(text))
        except ParseError as exc:
            errors.append(diagnostics.parse_error(side, exc))
    if errors:
        logger.debug("skipping comparison: %d document(s) failed to parse", len(errors))
        return errors
    out = compare("", roots[0], roots[1])
    logger.debug("compared documents: %d mismatch(es)", len(out))
    return out


def compare_objects(json1: bytes | str, json2: bytes | str) -> list[Diagnostic]:
    """
    Compare two JSON documents whose top-level values are objects.

    Args:
        json1 (bytes | str): Expected JSON text.
        json2 (bytes | str): Actual JSON text.

    Returns:
        list[Diagnostic]: Ordered diagnostics; empty means equivalent. If either document
        fails to parse (or is not an object), one parse_error diagnostic per failed side
        is returned and no structural comparison is made.

    Examples:
        >>> from jsonassert.core.compare import compare_objects
        >>> [str(d) for d in compare_objects(b'{"a": true}', b'{}')]
        ['a mismatch. true vs. nil']
    """
    return _compare_documents(json1, json2, parse_object)


def compare_arrays(json1: bytes | str, json2: bytes | str) -> list[Diagnostic]:
    """
    Compare two JSON documents whose top-level values are arrays.

    Returns:
        list[Diagnostic]: Ordered diagnostics with element paths such as ``[0].item1``.
        Parse failures are reported exactly as in compare_objects.
    """
    return _compare_documents(json1, json2, parse_array)
