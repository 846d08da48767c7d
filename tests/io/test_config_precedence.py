from __future__ import annotations

from pathlib import Path

import pytest

from jsonassert.io.config import AssertSettings

_ENV_KEYS = [
    "JSONASSERT_ENCODING",
    "JSONASSERT_STRICT_DECODE",
    "JSONASSERT_BY_ALIAS",
    "JSONASSERT_EXCLUDE_NONE",
    "JSONASSERT_SUMMARY",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write_toml(tmp: Path, name: str, content: str) -> Path:
    p = tmp / name
    p.write_text(content)
    return p


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    # Arrange TOML
    _write_toml(
        tmp_path,
        "jsonassert.toml",
        """
        [jsonassert]
        encoding = "latin-1"
        strict_decode = false
        summary = false
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    # Arrange ENV that should override TOML
    monkeypatch.setenv("JSONASSERT_STRICT_DECODE", "yes")
    monkeypatch.setenv("JSONASSERT_ENCODING", "utf-16")

    # Act
    s = AssertSettings.load()

    # Assert precedence: env > TOML
    assert s.encoding == "utf-16"
    assert s.strict_decode is True
    assert s.summary is False  # TOML only


def test_settings_from_toml_top_level_keys(tmp_path: Path, monkeypatch) -> None:
    _write_toml(tmp_path, "jsonassert.toml", "by_alias = false\nexclude_none = true\n")
    monkeypatch.chdir(tmp_path)

    s = AssertSettings.load()

    assert s.by_alias is False
    assert s.exclude_none is True


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    _write_toml(
        tmp_path,
        "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.jsonassert]
        summary = false
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)

    assert AssertSettings.load().summary is False


def test_settings_from_explicit_path(tmp_path: Path) -> None:
    p = _write_toml(tmp_path, "custom.toml", "[jsonassert]\nstrict_decode = false\n")
    assert AssertSettings.from_toml(p).strict_decode is False


def test_settings_defaults_when_no_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert AssertSettings.load() == AssertSettings()
    s = AssertSettings()
    assert s.encoding == "utf-8"
    assert s.strict_decode is True
    assert s.by_alias is True
    assert s.exclude_none is False
    assert s.summary is True


def test_malformed_values_are_ignored(tmp_path: Path, monkeypatch) -> None:
    _write_toml(tmp_path, "jsonassert.toml", 'encoding = "no-such-codec"\nsummary = "maybe"\n')
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("JSONASSERT_BY_ALIAS", "sometimes")

    assert AssertSettings.load() == AssertSettings()


def test_unparseable_toml_falls_back_to_defaults(tmp_path: Path, monkeypatch) -> None:
    _write_toml(tmp_path, "jsonassert.toml", "summary = = false")
    monkeypatch.chdir(tmp_path)

    assert AssertSettings.load() == AssertSettings()


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("on", True), ("TRUE", True), ("0", False), ("off", False), ("No", False)],
)
def test_env_boolean_spellings(monkeypatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("JSONASSERT_SUMMARY", raw)
    assert AssertSettings.from_env().summary is expected


def test_env_custom_prefix(monkeypatch) -> None:
    monkeypatch.setenv("MYTESTS_EXCLUDE_NONE", "true")
    assert AssertSettings.from_env(prefix="MYTESTS_").exclude_none is True
