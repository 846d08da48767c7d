"""
Configuration for round-trip checks.

Defines AssertSettings, a frozen dataclass carrying the options that shape how a source
document is read, decoded into a typed container, re-encoded, and summarized.

Precedence
- environment (JSONASSERT_*) > TOML (jsonassert.toml or [tool.jsonassert] in
  pyproject.toml) > defaults.

Import DAG discipline
- Depends only on stdlib. Consumed by jsonassert.io.roundtrip and jsonassert.testing.

Notes
- Malformed values never raise; they leave the current setting unchanged.
"""

from __future__ import annotations

import codecs
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

__all__ = ["AssertSettings"]

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}
_FALSY = {"0", "false", "f", "no", "n", "off"}
_BOOL_FIELDS = ("strict_decode", "by_alias", "exclude_none", "summary")


def _bool(v: Any) -> bool | None:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        lo = v.strip().lower()
        if lo in _TRUTHY:
            return True
        if lo in _FALSY:
            return False
    return None


def _known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


@dataclass(frozen=True)
class AssertSettings:
    """
    Runtime settings for round-trip checks.

    Attributes:
        encoding (str): Text encoding of source files. Sources are re-encoded to UTF-8
            before parsing when this is not UTF-8.
        strict_decode (bool): Decode with pydantic strict mode, so ``"1"`` is not coerced
            into a float field.
        by_alias (bool): Re-encode using field aliases (e.g. ``Field(alias="num-empty")``).
        exclude_none (bool): Drop fields whose value is None on re-encode.
        summary (bool): Prepend ``*** N errors in <source>`` when mismatches are found.

    Examples:
        >>> from jsonassert.io.config import AssertSettings
        >>> AssertSettings(strict_decode=False)  # doctest: +ELLIPSIS
        AssertSettings(...)
    """

    encoding: str = "utf-8"
    strict_decode: bool = True
    by_alias: bool = True
    exclude_none: bool = False
    summary: bool = True

    @classmethod
    def _apply_mapping(cls, base: AssertSettings, cfg: dict[str, Any] | None) -> AssertSettings:
        """Apply a loose config mapping onto AssertSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "encoding" in cfg and isinstance(cfg["encoding"], str):
            enc = cfg["encoding"].strip()
            if enc and _known_encoding(enc):
                s = replace(s, encoding=enc)

        for name in _BOOL_FIELDS:
            if name in cfg:
                flag = _bool(cfg[name])
                if flag is not None:
                    s = replace(s, **{name: flag})

        return s

    @classmethod
    def from_env(
        cls, base: AssertSettings | None = None, prefix: str = "JSONASSERT_"
    ) -> AssertSettings:
        """
        Build AssertSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - JSONASSERT_ENCODING
            - JSONASSERT_STRICT_DECODE (1/0/true/false/yes/no/on/off)
            - JSONASSERT_BY_ALIAS
            - JSONASSERT_EXCLUDE_NONE
            - JSONASSERT_SUMMARY
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for name in ("encoding", *_BOOL_FIELDS):
            v = os.getenv(prefix + name.upper())
            if v:
                mapping[name] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> AssertSettings:
        """
        Build AssertSettings from a TOML file.

        Search order when `path` is None:
            1) ./jsonassert.toml (with either a [jsonassert] table or top-level keys)
            2) ./pyproject.toml under [tool.jsonassert]

        Returns defaults if no file is present or none of them parse.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "jsonassert.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("jsonassert") if isinstance(tool, dict) else None
            elif isinstance(data.get("jsonassert"), dict):
                cfg = data["jsonassert"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> AssertSettings:
        """
        Load AssertSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search jsonassert.toml then
                pyproject.toml in the current directory.
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
