from __future__ import annotations

from pathlib import Path

import pytest

from jsonassert.core.compare import compare_arrays, compare_objects
from jsonassert.core.diagnostics import DiagnosticKind

TESTDATA = Path(__file__).resolve().parents[1] / "testdata"

ARRAY = (TESTDATA / "array.json").read_bytes()
ARRAY_NULLS = (TESTDATA / "arrayNulls.json").read_bytes()
ARRAY_MISSING = (TESTDATA / "arrayMissing.json").read_bytes()
ARRAY_NEW_DATA_TYPE = (TESTDATA / "arrayNewDataType.json").read_bytes()


@pytest.mark.parametrize(
    "json1,json2,expected",
    [
        (ARRAY, ARRAY, []),
        (ARRAY, ARRAY_NULLS, []),
        (ARRAY_NULLS, ARRAY, []),
        (ARRAY, ARRAY_MISSING, []),
        (ARRAY_MISSING, ARRAY, []),
        (
            ARRAY,
            ARRAY_NEW_DATA_TYPE,
            [
                '[0].item1 mismatch. "" vs. 1',
                '[0].item2 mismatch. "value2" vs. 2',
                '[1].item1 mismatch. "value3" vs. 3',
                '[1].item2 mismatch. "" vs. 4',
            ],
        ),
        ('[{"a": null}]', '[{"a": {"1":"", "2":"b"}}]', ['[0].a mismatch. nil vs. {"1":"","2":"b"}']),
    ],
    ids=[
        "same document",
        "null on the right",
        "null on the left",
        "missing on the right",
        "missing on the left",
        "totally different values",
        "null against object with children",
    ],
)
def test_compare_arrays_table(json1: bytes | str, json2: bytes | str, expected: list[str]) -> None:
    assert [str(d) for d in compare_arrays(json1, json2)] == expected


def test_root_length_mismatch_reports_once() -> None:
    out = compare_arrays("[1, 2]", "[1]")
    assert [str(d) for d in out] == ["<root> mismatch. [1,2] vs. [1]"]
    assert out[0].path == ""


def test_nested_array_against_null_counts_as_empty() -> None:
    assert compare_arrays('[{"tags": []}]', '[{"tags": null}]') == []
    assert [str(d) for d in compare_arrays('[{"tags": ["x"]}]', '[{"tags": null}]')] == [
        '[0].tags mismatch. ["x"] vs. nil'
    ]


def test_elements_compare_in_index_order() -> None:
    out = compare_arrays("[1, 2, 3]", "[9, 2, 8]")
    assert [d.path for d in out] == ["[0]", "[2]"]


@pytest.mark.parametrize("json1,json2,side", [("[", ARRAY, 1), (ARRAY, "[", 2)])
def test_unparseable_documents_short_circuit(json1: bytes | str, json2: bytes | str, side: int) -> None:
    out = compare_arrays(json1, json2)
    assert len(out) == 1
    assert out[0].kind is DiagnosticKind.PARSE_ERROR
    assert out[0].message.startswith(f"error unmarshalling json{side}: ")


def test_object_root_is_a_parse_error() -> None:
    assert [str(d) for d in compare_arrays("[]", '{"a": 1}')] == [
        "error unmarshalling json2: expected a JSON array at top level, got object"
    ]


def _nested(depth: int, leaf: str = "") -> str:
    return "[" * depth + leaf + "]" * depth


def test_deeply_nested_documents_compare_without_error() -> None:
    doc = _nested(600)
    assert compare_arrays(doc, doc) == []
    assert compare_objects('{"a": ' + doc + "}", '{"a": ' + doc + "}") == []

    out = compare_arrays(_nested(600, "1"), _nested(600, "2"))
    assert [str(d) for d in out] == ["[0]" * 600 + " mismatch. 1 vs. 2"]


def test_nesting_beyond_decoder_depth_is_a_parse_error() -> None:
    deep = _nested(100000)

    out = compare_arrays(deep, "[]")
    assert [d.kind for d in out] == [DiagnosticKind.PARSE_ERROR]
    assert out[0].message.startswith("error unmarshalling json1: ")

    out = compare_objects("{}", '{"a": ' + deep + "}")
    assert [str(d) for d in out] == ["error unmarshalling json2: exceeds maximum nesting depth"]
