from __future__ import annotations

import pytest

from jsonassert.core import diagnostics
from jsonassert.core.diagnostics import Diagnostic, DiagnosticKind, render
from jsonassert.core.errors import EquivalenceError
from jsonassert.core.value import NULL, parse


@pytest.mark.parametrize(
    "text,expected",
    [
        ('"val"', '"val"'),
        ('"say \\"hi\\""', '"say \\"hi\\""'),
        ('"é"', '"é"'),
        ("1", "1"),
        ("-0.5", "-0.5"),
        ("1e21", "1e+21"),
        ("true", "true"),
        ("false", "false"),
        ("[1, null, \"a\"]", '[1,null,"a"]'),
        ('{"b": 1, "a": {"d": [], "c": {}}}', '{"a":{"c":{},"d":[]},"b":1}'),
    ],
)
def test_render(text: str, expected: str) -> None:
    assert render(parse(text)) == expected


def test_render_nil() -> None:
    assert render(None) == "nil"
    assert render(NULL) == "nil"


def test_mismatch_fields() -> None:
    d = diagnostics.mismatch("obj.b", parse('"val2"'), None)
    assert d == Diagnostic(
        kind=DiagnosticKind.MISMATCH,
        message='obj.b mismatch. "val2" vs. nil',
        path="obj.b",
        left='"val2"',
        right="nil",
    )
    assert str(d) == d.message


def test_message_formats() -> None:
    err = ValueError("boom")
    assert str(diagnostics.parse_error(2, err)) == "error unmarshalling json2: boom"
    assert str(diagnostics.decode_error("a.json", err)) == "error decoding json in a.json: boom"
    assert str(diagnostics.invalid_argument(err)) == "boom"
    assert str(diagnostics.resource_error(err)) == "boom"
    assert str(diagnostics.summary(3, "a.json")) == "*** 3 errors in a.json"


def test_kind_values_are_lower_snake() -> None:
    assert {k.value for k in DiagnosticKind} == {
        "mismatch",
        "parse_error",
        "decode_error",
        "invalid_argument",
        "resource_error",
        "summary",
    }


def test_equivalence_error_lists_every_diagnostic() -> None:
    ds = [diagnostics.summary(1, "x"), diagnostics.mismatch("a", parse("1"), None)]
    err = EquivalenceError(ds)
    assert isinstance(err, AssertionError)
    assert err.diagnostics == tuple(ds)
    assert str(err) == "*** 1 errors in x\na mismatch. 1 vs. nil"


def test_root_mismatch_is_labelled_but_keeps_empty_path() -> None:
    d = diagnostics.mismatch("", parse("1"), parse('"x"'))
    assert d.message == '<root> mismatch. 1 vs. "x"'
    assert d.path == ""
