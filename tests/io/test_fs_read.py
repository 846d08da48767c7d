from __future__ import annotations

from pathlib import Path

import pytest

from jsonassert.core.errors import ResourceError
from jsonassert.io.fs import open_read, read_source, source_name


def test_read_source_returns_raw_bytes(tmp_path: Path) -> None:
    p = tmp_path / "doc.json"
    p.write_bytes(b'{"a": 1}\n')
    assert read_source(p) == b'{"a": 1}\n'
    assert read_source(str(p)) == b'{"a": 1}\n'


def test_missing_file_raises_resource_error_with_cause(tmp_path: Path) -> None:
    p = tmp_path / "missing.json"
    with pytest.raises(ResourceError) as info:
        read_source(p)
    assert str(info.value).startswith(f"open {p}: ")
    assert isinstance(info.value.__cause__, FileNotFoundError)
    assert isinstance(info.value, OSError)


def test_handle_is_closed_on_every_exit_path(tmp_path: Path) -> None:
    p = tmp_path / "doc.json"
    p.write_text("{}")

    with open_read(p) as fh:
        assert not fh.closed
    assert fh.closed

    with pytest.raises(RuntimeError):
        with open_read(p) as fh2:
            raise RuntimeError("stop")
    assert fh2.closed


def test_source_name_accepts_path_like(tmp_path: Path) -> None:
    assert source_name(tmp_path / "x.json") == str(tmp_path / "x.json")
    assert source_name("x.json") == "x.json"
