"""
Lightweight JSON serialization/deserialization utilities.

Provides `json_loads` as a thin wrapper around the stdlib `json` module that follows
standard JSON number semantics, and `json_dumps_canonical` as the single canonical JSON
policy used when rendering values inside diagnostics. This module is zero-IO.

Notes:
    - Canonical JSON:
        - sort_keys=True
        - separators=(",", ":")
        - ensure_ascii=False
    - All JSON numbers decode to float (f64), matching the comparison model.
    - The non-standard constants NaN, Infinity and -Infinity are rejected.
    - No side effects; stdlib-only.
"""

from __future__ import annotations

import json
from typing import Any

__all__ = [
    "json_loads",
    "json_dumps_canonical",
]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON number constant {name!r}")


def json_loads(s: str | bytes | bytearray) -> Any:
    """
    Deserialize a JSON document to Python objects using the stdlib json module.

    Args:
        s (str | bytes | bytearray): JSON text. Bytes are decoded by the stdlib
            (UTF-8/16/32 detection); a leading UTF-8 BOM is stripped first.

    Returns:
        Any: Decoded Python object (dict, list, str, float, bool, or None). Integers are
        returned as float.

    Raises:
        json.JSONDecodeError: On malformed JSON text.
        ValueError: On NaN/Infinity constants.
        UnicodeDecodeError: On bytes that are not valid Unicode text.
    """
    if isinstance(s, (bytes, bytearray)) and s[:3] == b"\xef\xbb\xbf":
        s = s[3:]
    return json.loads(s, parse_int=float, parse_constant=_reject_constant)


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        str: Canonical JSON string with sort_keys=True, compact separators,
        and ensure_ascii=False.

    Notes:
        This function assumes the input is JSON-serializable and does not perform
        coercion of unsupported types.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
