"""
jsonassert.io — reading sources and round-tripping them through typed containers.

## Responsibilities
- Read a JSON source as a scoped resource (fs).
- Decode it into a pydantic-backed typed container, re-encode it, and compare the two
  documents with jsonassert.core (roundtrip).
- Carry the options for that process, loaded from env/TOML (config).

## Public API
- AssertSettings — options for decoding/encoding and reporting.
- RoundTripTarget, Shape — a typed container plus its declared object/array shape.
- check_round_trip, check_round_trip_bytes — run a round-trip check and return diagnostics.

## Import DAG discipline
- Depends on stdlib, pydantic, and jsonassert.core.
- MUST NOT import jsonassert.testing.
"""

from __future__ import annotations

from .config import AssertSettings
from .roundtrip import RoundTripTarget, Shape, check_round_trip, check_round_trip_bytes

__all__ = [
    "AssertSettings",
    "RoundTripTarget",
    "Shape",
    "check_round_trip",
    "check_round_trip_bytes",
]
