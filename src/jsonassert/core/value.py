"""
Immutable tagged-union model of parsed JSON values.

Responsibilities
- Represent a JSON value as exactly one of Null, Bool, Number, String, Array, Object.
- Parse raw JSON text (bytes or str) into that model, raising ParseError on malformed input.
- Answer the emptiness questions the equivalence rule depends on (is_nil, is_empty).

Style
- Zero-IO (stdlib only).
- Values are frozen dataclasses; Object members are exposed through a read-only mapping.
- Absent values (a key missing from an object) are represented by ``None``, never by a
  shared sentinel. ``None`` and ``Null`` are both "nil" for comparison purposes.

Examples:
    >>> from jsonassert.core.value import Object, Number, parse, is_empty
    >>> doc = parse(b'{"a": 1, "b": {"c": ""}}')
    >>> isinstance(doc, Object)
    True
    >>> doc.members["a"] == Number(1.0)
    True
    >>> is_empty(doc.members["b"])
    True
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from .errors import ParseError
from .serde import json_loads

__all__ = [
    "Null",
    "Bool",
    "Number",
    "String",
    "Array",
    "Object",
    "JsonValue",
    "NULL",
    "parse",
    "parse_object",
    "parse_array",
    "from_python",
    "to_python",
    "is_nil",
    "is_empty",
    "kind_name",
]

# Largest magnitude for which every integer is exactly representable as f64.
_MAX_SAFE_INTEGER = 2**53


@dataclass(frozen=True)
class Null:
    """JSON ``null``."""


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Number:
    """
    JSON number as an f64.

    Notes:
        Integers and floats compare by value: ``Number(1.0) == Number(float(1))``.
    """

    value: float


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Array:
    items: tuple[JsonValue, ...] = ()


@dataclass(frozen=True)
class Object:
    """
    JSON object with unique string keys.

    Attributes:
        members (Mapping[str, JsonValue]): Read-only view of the key/value pairs. Insertion
            order follows the source document; comparisons never depend on it.
    """

    members: Mapping[str, JsonValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def sorted_keys(self) -> list[str]:
        return sorted(self.members)


JsonValue = Union[Null, Bool, Number, String, Array, Object]

NULL = Null()


def _scalar_from_python(obj: Any) -> JsonValue:
    if obj is None:
        return NULL
    # bool before int/float: bool is an int subclass
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, (int, float)):
        return Number(float(obj))
    if isinstance(obj, str):
        return String(obj)
    raise TypeError(f"cannot represent {type(obj).__name__} as a JSON value")


def from_python(obj: Any) -> JsonValue:
    """
    Build a JsonValue from decoded Python data.

    Args:
        obj (Any): dict (str keys), list/tuple, str, int, float, bool, or None. Containers
            must not reference themselves.

    Returns:
        JsonValue: The equivalent immutable value.

    Raises:
        TypeError: If obj (or anything nested inside it) is not JSON-like.

    Notes:
        Conversion uses an explicit stack, so nesting depth is not bounded by the
        interpreter's recursion limit.
    """
    # Pre-order listing of every container; built in reverse so children exist first.
    order: list[Any] = []
    pending = [obj]
    while pending:
        node = pending.pop()
        if isinstance(node, dict):
            for key in node:
                if not isinstance(key, str):
                    raise TypeError(f"object keys must be str, got {type(key).__name__}")
            order.append(node)
            pending.extend(node.values())
        elif isinstance(node, (list, tuple)):
            order.append(node)
            pending.extend(node)

    built: dict[int, JsonValue] = {}

    def child(item: Any) -> JsonValue:
        if isinstance(item, (dict, list, tuple)):
            return built[id(item)]
        return _scalar_from_python(item)

    for node in reversed(order):
        if isinstance(node, dict):
            built[id(node)] = Object({key: child(item) for key, item in node.items()})
        else:
            built[id(node)] = Array(tuple(child(item) for item in node))
    return child(obj)


def _scalar_to_python(value: JsonValue | None) -> Any:
    if value is None or isinstance(value, Null):
        return None
    if isinstance(value, Bool):
        return value.value
    if isinstance(value, Number):
        v = value.value
        if math.isfinite(v) and v.is_integer() and abs(v) <= _MAX_SAFE_INTEGER:
            return int(v)
        return v
    if isinstance(value, String):
        return value.value
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def to_python(value: JsonValue | None) -> Any:
    """
    Convert a JsonValue back to plain Python data.

    Notes:
        Integral numbers within the exact-integer range of f64 become ``int`` so that
        renderings read ``1`` rather than ``1.0``.
    """
    order: list[Array | Object] = []
    pending: list[JsonValue | None] = [value]
    while pending:
        node = pending.pop()
        if isinstance(node, Array):
            order.append(node)
            pending.extend(node.items)
        elif isinstance(node, Object):
            order.append(node)
            pending.extend(node.members.values())

    built: dict[int, Any] = {}

    def child(item: JsonValue | None) -> Any:
        if isinstance(item, (Array, Object)):
            return built[id(item)]
        return _scalar_to_python(item)

    for node in reversed(order):
        if isinstance(node, Array):
            built[id(node)] = [child(item) for item in node.items]
        else:
            built[id(node)] = {key: child(item) for key, item in node.members.items()}
    return child(value)


def parse(data: bytes | bytearray | str) -> JsonValue:
    """
    Parse JSON text into a JsonValue.

    Args:
        data (bytes | bytearray | str): UTF-8 JSON text.

    Returns:
        JsonValue: Parsed value.

    Raises:
        ParseError: If the text is not valid JSON, or nests deeper than the decoder
            supports. The message is the underlying decoder's description of the error.
    """
    try:
        decoded = json_loads(data)
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueError subclasses.
        raise ParseError(str(exc)) from exc
    except RecursionError as exc:
        raise ParseError("exceeds maximum nesting depth") from exc
    return from_python(decoded)


def parse_object(data: bytes | bytearray | str) -> Object:
    """Parse JSON text whose top-level value must be an object."""
    value = parse(data)
    if not isinstance(value, Object):
        raise ParseError(f"expected a JSON object at top level, got {kind_name(value)}")
    return value


def parse_array(data: bytes | bytearray | str) -> Array:
    """Parse JSON text whose top-level value must be an array."""
    value = parse(data)
    if not isinstance(value, Array):
        raise ParseError(f"expected a JSON array at top level, got {kind_name(value)}")
    return value


def is_nil(value: JsonValue | None) -> bool:
    """True for an absent value (None) or JSON null."""
    return value is None or isinstance(value, Null)


def is_empty(value: JsonValue | None) -> bool:
    """
    Check whether a value is recursively empty.

    Empty values: absent, null, ``""``, ``0``, ``false``, ``[]``, and objects whose values
    are all recursively empty (including ``{}``).

    Examples:
        >>> from jsonassert.core.value import parse, is_empty
        >>> is_empty(parse('{"a": {"b": null, "c": 0}}'))
        True
        >>> is_empty(parse('[0]'))
        False
    """
    pending: list[JsonValue | None] = [value]
    while pending:
        node = pending.pop()
        if is_nil(node):
            continue
        if isinstance(node, Bool):
            empty = node.value is False
        elif isinstance(node, Number):
            empty = node.value == 0.0
        elif isinstance(node, String):
            empty = node.value == ""
        elif isinstance(node, Array):
            empty = len(node.items) == 0
        elif isinstance(node, Object):
            pending.extend(node.members.values())
            continue
        else:
            raise TypeError(f"not a JSON value: {type(node).__name__}")
        if not empty:
            return False
    return True


def kind_name(value: JsonValue | None) -> str:
    """Lower-case JSON type name of a value; absent values report as ``null``."""
    if is_nil(value):
        return "null"
    if isinstance(value, Bool):
        return "boolean"
    if isinstance(value, Number):
        return "number"
    if isinstance(value, String):
        return "string"
    if isinstance(value, Array):
        return "array"
    if isinstance(value, Object):
        return "object"
    raise TypeError(f"not a JSON value: {type(value).__name__}")
