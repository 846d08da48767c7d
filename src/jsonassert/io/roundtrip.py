"""
Round-trip checks: decode a JSON source into a typed container, re-encode, compare.

Purpose
- Verify that the types an application uses to receive JSON (pydantic models, dataclasses,
  TypedDicts, or list/dict annotations of them) can decode and re-encode a real document
  without losing or inventing data.

Pipeline
1) Resolve the target into a RoundTripTarget (pydantic TypeAdapter + declared Shape).
2) Read the source bytes (scoped file handle, see jsonassert.io.fs).
3) Decode the bytes with the adapter (strict per AssertSettings).
4) Re-encode the decoded value (aliases / None handling per AssertSettings).
5) Compare original and re-encoded bytes with the object- or array-rooted engine entry.
6) Prefix a ``*** N errors in <source>`` summary when mismatches are found.

Every failure is returned as a Diagnostic; nothing here raises for bad input.

Examples:
    >>> from pydantic import BaseModel
    >>> from jsonassert.io.roundtrip import check_round_trip_bytes
    >>> class Point(BaseModel):
    ...     x: float = 0
    ...     y: float = 0
    >>> check_round_trip_bytes(b'{"x": 1}', Point)
    []
"""

from __future__ import annotations

import codecs
import dataclasses
import logging
import os
import types
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin, is_typeddict

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.errors import PydanticUndefinedAnnotation, PydanticUserError

from jsonassert.core import diagnostics
from jsonassert.core.compare import compare_arrays, compare_objects
from jsonassert.core.diagnostics import Diagnostic
from jsonassert.core.errors import InvalidArgumentError, ResourceError

from .config import AssertSettings
from .fs import read_source, source_name

__all__ = [
    "Shape",
    "RoundTripTarget",
    "check_round_trip",
    "check_round_trip_bytes",
]

logger = logging.getLogger(__name__)


class Shape(Enum):
    OBJECT = "object"
    ARRAY = "array"


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _is_type_form(tp: Any) -> bool:
    return isinstance(tp, type) or get_origin(tp) is not None


def _infer_shape(tp: Any) -> Shape | None:
    """Shape of a declared type, or None when it cannot hold a JSON object or array."""
    origin = get_origin(tp)
    if origin is Annotated:
        return _infer_shape(get_args(tp)[0])
    if origin is Union or origin is types.UnionType:
        # Optional[X] and unions of same-shaped members keep that shape.
        shapes = {_infer_shape(arg) for arg in get_args(tp) if arg is not type(None)}
        if len(shapes) == 1:
            return shapes.pop()
        return None

    cls = origin if origin is not None else tp
    if not isinstance(cls, type):
        return None
    if issubclass(cls, BaseModel) or dataclasses.is_dataclass(cls) or is_typeddict(cls):
        return Shape.OBJECT
    if issubclass(cls, Mapping):
        return Shape.OBJECT
    if issubclass(cls, (str, bytes, bytearray)):
        return None
    if issubclass(cls, (Sequence, Set)):
        return Shape.ARRAY
    return None


@dataclass(frozen=True)
class RoundTripTarget:
    """
    A type that can be decoded from and encoded to JSON, tagged with its top-level shape.

    Attributes:
        declared (Any): The declared type, e.g. ``MyModel`` or ``list[MyItem]``.
        shape (Shape): Whether documents of this type are JSON objects or arrays.
        adapter (TypeAdapter): pydantic adapter used for decoding and encoding.

    Examples:
        >>> from jsonassert.io.roundtrip import RoundTripTarget, Shape
        >>> RoundTripTarget.for_type(list[dict[str, int]]).shape is Shape.ARRAY
        True
    """

    declared: Any
    shape: Shape
    adapter: TypeAdapter[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "adapter", TypeAdapter(self.declared))

    @classmethod
    def for_type(cls, target: Any) -> RoundTripTarget:
        """
        Resolve a target into a RoundTripTarget, inferring its shape from the declared type.

        Args:
            target (Any): A RoundTripTarget (returned as is), a type or type annotation, or
                an instance whose class is used (e.g. a model instance).

        Returns:
            RoundTripTarget: The resolved target.

        Raises:
            InvalidArgumentError: If the type is not object-like or array-like, or pydantic
                cannot build a schema for it (including models with unresolved forward
                references).
        """
        if isinstance(target, RoundTripTarget):
            return target
        tp = target if _is_type_form(target) else type(target)
        shape = _infer_shape(tp)
        if shape is None:
            raise InvalidArgumentError(
                "invalid argument: target must be a model, mapping, or sequence type, "
                f"but got {_type_name(tp)}"
            )
        try:
            return cls(tp, shape)
        except (PydanticUserError, PydanticUndefinedAnnotation) as exc:
            raise InvalidArgumentError(
                f"invalid argument: cannot build a JSON schema for {_type_name(tp)}: {exc}"
            ) from exc


def _to_utf8(raw: bytes, encoding: str) -> bytes:
    # A leading byte-order mark is tolerated, as in the comparison engine.
    if codecs.lookup(encoding).name == "utf-8":
        encoding = "utf-8-sig"
    return raw.decode(encoding).encode("utf-8")


def _round_trip(
    raw: bytes, target: RoundTripTarget, source: str, settings: AssertSettings
) -> list[Diagnostic]:
    try:
        original = _to_utf8(raw, settings.encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        return [diagnostics.decode_error(source, exc)]

    try:
        value = target.adapter.validate_json(original, strict=settings.strict_decode)
    except ValidationError as exc:
        logger.debug("decode failed for %s: %d error(s)", source, exc.error_count())
        return [diagnostics.decode_error(source, exc)]

    encoded = target.adapter.dump_json(
        value, by_alias=settings.by_alias, exclude_none=settings.exclude_none
    )
    logger.debug("re-encoded %s: %d -> %d bytes", source, len(original), len(encoded))

    if target.shape is Shape.OBJECT:
        out = compare_objects(original, encoded)
    else:
        out = compare_arrays(original, encoded)

    if out and settings.summary:
        out.insert(0, diagnostics.summary(len(out), source))
    return out


def check_round_trip_bytes(
    raw: bytes,
    target: Any,
    *,
    source: str = "<bytes>",
    settings: AssertSettings | None = None,
) -> list[Diagnostic]:
    """
    Round-trip an in-memory JSON document through a typed container.

    Args:
        raw (bytes): JSON text as read from the source.
        target (Any): Type, annotation, instance, or RoundTripTarget (see
            RoundTripTarget.for_type).
        source (str): Name used in decode errors and the summary line.
        settings (AssertSettings | None): Options; defaults to AssertSettings.load().

    Returns:
        list[Diagnostic]: Empty when the document survives the round trip.
    """
    settings = settings or AssertSettings.load()
    try:
        resolved = RoundTripTarget.for_type(target)
    except InvalidArgumentError as exc:
        return [diagnostics.invalid_argument(exc)]
    return _round_trip(raw, resolved, source, settings)


def check_round_trip(
    source: str | os.PathLike[str],
    target: Any,
    *,
    settings: AssertSettings | None = None,
) -> list[Diagnostic]:
    """
    Round-trip a JSON file through a typed container and report any differences.

    Args:
        source (str | os.PathLike[str]): Path of the JSON document; also used as its
            name in diagnostics.
        target (Any): Type, annotation, instance, or RoundTripTarget (see
            RoundTripTarget.for_type).
        settings (AssertSettings | None): Options; defaults to AssertSettings.load().

    Returns:
        list[Diagnostic]: Empty when the document survives the round trip. Otherwise one
        of: a single invalid_argument diagnostic (no IO attempted); a single
        resource_error; a single decode_error; or a summary followed by mismatches.

    Examples:
        >>> from jsonassert.io.roundtrip import check_round_trip
        >>> [str(d) for d in check_round_trip("missing.json", dict)]  # doctest: +SKIP
        ['open missing.json: No such file or directory']
    """
    settings = settings or AssertSettings.load()
    name = source_name(source)
    try:
        resolved = RoundTripTarget.for_type(target)
    except InvalidArgumentError as exc:
        return [diagnostics.invalid_argument(exc)]

    try:
        raw = read_source(source)
    except ResourceError as exc:
        return [diagnostics.resource_error(exc)]
    logger.debug("read %d bytes from %s", len(raw), name)

    return _round_trip(raw, resolved, name, settings)
